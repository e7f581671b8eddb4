from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List, Optional, Tuple
from urllib.parse import urlparse


class Settings(BaseSettings):
    database_url: str
    database_sslmode: str = "require"   # cifra sin validar el certificado del servidor
    sql_echo: bool = False
    cloudinary_url: Optional[str] = None
    media_folder: str = "customer_requirements"
    media_upload_timeout: int = 60
    backend_cors_origins: str = "*"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "allow"

    @field_validator("cloudinary_url")
    @classmethod
    def _check_cloudinary_url(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        parsed = urlparse(value)
        if parsed.scheme != "cloudinary" or not (parsed.username and parsed.password and parsed.netloc.rpartition("@")[2]):
            raise ValueError("cloudinary_url must look like cloudinary://<api_key>:<api_secret>@<cloud_name>")
        return value

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.backend_cors_origins.split(",") if origin.strip()]

    @property
    def cloudinary_credentials(self) -> Optional[Tuple[str, str, str]]:
        """(cloud_name, api_key, api_secret); el formato ya lo comprobó el validador."""
        if not self.cloudinary_url:
            return None
        parsed = urlparse(self.cloudinary_url)
        return parsed.netloc.rpartition("@")[2], parsed.username, parsed.password
