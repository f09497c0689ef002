import os
import secrets
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

basic_security = HTTPBasic()

# Control and stats routes only; input and palette routes stay open to the canvas page.
API_USERNAME = os.environ.get("PLAYGROUND_USERNAME", "admin")
API_PASSWORD = os.environ.get("PLAYGROUND_PASSWORD", "admin123")


def verify_basic_auth(credentials: HTTPBasicCredentials = Depends(basic_security)):
    username_ok = secrets.compare_digest(credentials.username.encode(), API_USERNAME.encode())
    password_ok = secrets.compare_digest(credentials.password.encode(), API_PASSWORD.encode())
    if not (username_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
