import json
from typing import Annotated, List, Union
from pydantic import AnyHttpUrl, validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    API_PREFIX: str = "/api"

    PROJECT_NAME: str = "Userhub API"
    PROJECT_DESCRIPTION: str = "Users collection service"
    DEBUG: bool = False

    # Server
    PORT: int = 8000

    # Base URL the users client talks to
    API_BASE_URL: str = "http://localhost:8000"

    # Bearer token accepted by GET /api/users; empty accepts any token
    API_TOKEN: str = ""

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./userhub.db"

    # Generated OpenAPI document
    OPENAPI_OUTPUT_FILE: str = "userhub/utils/swagger-output.json"

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[AnyHttpUrl], NoDecode] = []

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
