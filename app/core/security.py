"""HTTP Basic per le pagine admin. Credenziali da ADMIN_USER / ADMIN_PASS."""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.core.config import get_admin_credentials

logger = logging.getLogger(__name__)

basic_auth = HTTPBasic(realm="League admin")


def require_admin(credentials: HTTPBasicCredentials = Depends(basic_auth)) -> str:
    """
    Dependency: verifica utente e password (confronto a tempo costante).
    Credenziali errate -> 401 con WWW-Authenticate, così il browser ripropone il login.
    """
    user, password = get_admin_credentials()
    user_ok = secrets.compare_digest(credentials.username.encode("utf-8"), user.encode("utf-8"))
    pass_ok = secrets.compare_digest(credentials.password.encode("utf-8"), password.encode("utf-8"))
    if not (user_ok and pass_ok):
        logger.warning("Login admin fallito per utente %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenziali non valide",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username


def warn_if_default_password() -> None:
    _, password = get_admin_credentials()
    if password == "changeme":
        logger.warning("ADMIN_PASS non impostata: in uso la password di default")
