"""Penyimpanan token bearer di cookie sesi (ditandatangani, HttpOnly)."""

import logging
import time

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
STORED_AT_KEY = "token_stored_at"


class CredentialStore:
    """Menyimpan paling banyak satu token.

    ``mapping`` biasanya ``session`` milik Flask; di test cukup dict biasa.
    read() tidak pernah melempar error: token yang tidak ada, rusak, atau
    kedaluwarsa dibaca sebagai "".
    """

    def __init__(self, mapping, max_age=60 * 60 * 24, clock=None):
        self.mapping = mapping
        self.max_age = max_age
        self.clock = clock or time.time

    def store(self, token):
        self.mapping[TOKEN_KEY] = token
        self.mapping[STORED_AT_KEY] = self.clock()
        # PERMANENT_SESSION_LIFETIME hanya berlaku untuk sesi permanen
        if hasattr(self.mapping, "permanent"):
            self.mapping.permanent = True

    def read(self):
        token = self.mapping.get(TOKEN_KEY)
        if not token or not isinstance(token, str):
            return ""
        stored_at = self.mapping.get(STORED_AT_KEY)
        if not isinstance(stored_at, (int, float)):
            return ""
        if self.clock() - stored_at > self.max_age:
            logger.info("Token kedaluwarsa, dihapus dari sesi")
            self.delete()
            return ""
        return token

    def delete(self):
        self.mapping.pop(TOKEN_KEY, None)
        self.mapping.pop(STORED_AT_KEY, None)
