"""Klien REST API backend PDAM.

Semua panggilan lewat PdamAPI.request(): header "app-key" selalu dikirim,
token bearer ikut untuk panggilan yang butuh login, lalu amplop
{success, message, data} dari backend dirapikan menjadi ApiResult.

Klien ini tidak melempar error untuk kegagalan biasa. Status HTTP error,
server yang tidak bisa dihubungi, dan body yang bukan JSON semuanya
dikembalikan sebagai ApiResult(success=False) dengan pesan yang bisa
langsung ditampilkan ke pengguna.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests


logger = logging.getLogger(__name__)

NOT_AUTHENTICATED_MESSAGE = "Token tidak ditemukan"
SERVER_ERROR_MESSAGE = "Terjadi kesalahan server"
CONNECTION_ERROR_MESSAGE = "Terjadi kesalahan koneksi"


class Role(str, Enum):
    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"

    @classmethod
    def parse(cls, value):
        """Kembalikan role yang cocok, atau None kalau tidak dikenal."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.upper())
        except ValueError:
            return None


@dataclass
class ApiResult:
    """Hasil satu panggilan ke backend.

    success hanya True untuk respons 2xx yang amplopnya tidak berkata lain.
    data sudah dilepas dari pembungkus {data: ...}. http_status bernilai 0
    kalau respons tidak diterima atau tidak bisa dibaca.
    """

    success: bool
    message: str = ""
    data: Any = None
    http_status: int = 0
    count: Optional[int] = None

    @property
    def ok(self):
        return 200 <= self.http_status < 300

    @property
    def unauthorized(self):
        return self.http_status == 401

    def items(self):
        return ensure_list(self.data)


def unwrap_envelope(body):
    """Lepas pembungkus {data: ...}; {"data": {...}} dan {...} hasilnya sama."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def ensure_list(value):
    """None -> [], satu objek -> [objek], list tetap list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


class PdamAPI:
    """Klien untuk backend PDAM.

    ``session`` boleh diisi dari luar (dipakai test); kalau kosong dibuat
    requests.Session baru.
    """

    def __init__(self, *, base_url, app_key, timeout=15, session=None):
        self.base_url = base_url.rstrip("/")
        self.app_key = app_key
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Helper HTTP
    # ------------------------------------------------------------------
    def _headers(self, token):
        headers = {
            "app-key": self.app_key,
            # Data di server bisa berubah kapan saja, jangan pakai cache
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(self, method, path, *, body=None, token=None, authenticated=True):
        """Kirim satu request lalu rapikan responsnya menjadi ApiResult.

        Kalau ``authenticated`` dan token kosong, langsung kembalikan
        hasil 401 tanpa menyentuh jaringan.
        """
        if authenticated and not token:
            logger.warning("%s %s dibatalkan: token tidak ada", method, path)
            return ApiResult(success=False, message=NOT_AUTHENTICATED_MESSAGE, http_status=401)

        url = f"{self.base_url}{path}"
        try:
            logger.debug("Mengirim %s ke %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=body,
                headers=self._headers(token),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Request %s %s gagal: %s", method, url, exc)
            return ApiResult(success=False, message=CONNECTION_ERROR_MESSAGE)

        status = response.status_code
        payload = None
        if response.content:
            try:
                payload = response.json()
            except ValueError:
                logger.error("Body dari %s %s bukan JSON (HTTP %s)", method, url, status)
                return ApiResult(success=False, message=CONNECTION_ERROR_MESSAGE)

        envelope = payload if isinstance(payload, dict) else {}
        message = envelope.get("message")
        if not isinstance(message, str):
            message = ""
        count = envelope.get("count")
        if not isinstance(count, int):
            count = None

        if not 200 <= status < 300:
            logger.warning("Request %s %s dijawab HTTP %s: %s", method, url, status, message)
            return ApiResult(success=False, message=message or SERVER_ERROR_MESSAGE, http_status=status)

        return ApiResult(
            success=bool(envelope.get("success", True)),
            message=message,
            data=unwrap_envelope(payload),
            http_status=status,
            count=count,
        )

    # ------------------------------------------------------------------
    # Autentikasi
    # ------------------------------------------------------------------
    def authenticate(self, username, password):
        """POST /auth. Kalau berhasil, data berisi token dan role."""
        return self.request(
            "POST", "/auth",
            body={"username": username, "password": password},
            authenticated=False,
        )

    def register_admin(self, username, password, name, phone):
        return self.request(
            "POST", "/admins",
            body={"username": username, "password": password, "name": name, "phone": phone},
            authenticated=False,
        )

    # ------------------------------------------------------------------
    # Profil
    # ------------------------------------------------------------------
    def get_admin_profile(self, token):
        return self.request("GET", "/admins/me", token=token)

    def get_customer_profile(self, token):
        return self.request("GET", "/customers/me", token=token)

    # ------------------------------------------------------------------
    # Layanan (tarif)
    # ------------------------------------------------------------------
    def list_services(self, token):
        return self.request("GET", "/services", token=token)

    def get_service(self, token, service_id):
        return self.request("GET", f"/services/{service_id}", token=token)

    def create_service(self, token, payload):
        return self.request("POST", "/services", body=payload, token=token)

    def update_service(self, token, service_id, payload):
        # Selalu kirim keempat field, tidak pernah update parsial
        return self.request("PATCH", f"/services/{service_id}", body=payload, token=token)
