"""
Konfigurasi Portal PDAM, dibaca dari environment saat modul diimpor.

File .env di direktori kerja dimuat lebih dulu, jadi untuk lokal cukup
isi PDAM_BASE_URL dan PDAM_APP_KEY di sana (lihat .env.example).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default="false"):
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    # Alamat REST API backend, mis. https://pdam.example.com/api
    base_url: str = os.getenv("PDAM_BASE_URL", "http://localhost:8000")
    # App key statis, dikirim sebagai header "app-key" di setiap request
    app_key: str = os.getenv("PDAM_APP_KEY", "")

    # Kunci untuk menandatangani cookie sesi yang berisi token
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    # Umur token dalam detik (1 hari)
    token_max_age: int = int(os.getenv("TOKEN_MAX_AGE", str(60 * 60 * 24)))
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "15"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    debug: bool = _env_bool("DEBUG")
    port: int = int(os.getenv("PORT", "5001"))


settings = Settings()
