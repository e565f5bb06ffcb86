import os
import json
from typing import Annotated, List, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # Basic settings
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Course Registry"
    VERSION: str = "0.1.0"

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # JSON array first, then comma separated
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                if v.startswith("[") and v.endswith("]"):
                    v = v.strip("[]").strip()
                    if v:
                        return [i.strip().strip('"\'') for i in v.split(",")]
                    return []
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Static information served at GET /
    INFO_STUDENT_ID: str = "670610724"
    INFO_FIRST_NAME: str = "Melissa"
    INFO_LAST_NAME: str = "Tiangtae"
    INFO_PROGRAM: str = "CPE"
    INFO_SECTION: str = "001"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
