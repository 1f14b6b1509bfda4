"""Pydantic models for users. Any user can act as a provider."""

from pydantic import BaseModel


class CreateUserData(BaseModel):
    name: str
    email: str


class User(BaseModel):
    id: str
    name: str
    email: str
