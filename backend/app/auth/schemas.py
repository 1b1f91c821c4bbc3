from pydantic import BaseModel, ConfigDict, Field

class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    username: str
    password: str
    remember_me: bool = Field(default=False, alias="rememberMe")

class AdminCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=4, max_length=20)
    password: str = Field(min_length=6, max_length=20)

class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    current_password: str = Field(alias="currentPassword")
    new_password: str = Field(min_length=6, max_length=20, alias="newPassword")

class AdminProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    admin_id: str = Field(serialization_alias="adminId")
    username: str
    must_change_password: bool | None = Field(default=None, serialization_alias="mustChangePassword")

class AuthStatus(BaseModel):
    is_authenticated: bool = Field(serialization_alias="isAuthenticated")

class Message(BaseModel):
    message: str
    code: int
