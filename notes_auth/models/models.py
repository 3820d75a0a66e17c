from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class signup(BaseModel):
    email: str = Field(..., title="Email Address")
    password: str = Field(..., title="Password")


class signin(BaseModel):
    email: str = Field(..., title="Email Address")
    password: str = Field(..., title="Password")


class user_out(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", title="User ID")
    email: str = Field(..., title="Email Address")


class auth_response(BaseModel):
    user: user_out
    token: str


class res(BaseModel):
    message: str
