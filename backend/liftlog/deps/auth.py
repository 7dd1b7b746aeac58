# liftlog/deps/auth.py
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose.exceptions import ExpiredSignatureError, JWTError

from liftlog.security import owner_id_from_token

# Bearer auth in Swagger; tokens are issued by the identity provider
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_owner_id(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """
    Resolve the caller to an owner id. Routes never accept an owner id from
    the request body or path; this is the only source.
    """
    unauth = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if creds is None or not creds.credentials:
        raise unauth
    try:
        owner_id = owner_id_from_token(creds.credentials)
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except JWTError:
        raise unauth

    if owner_id is None:
        raise unauth
    return owner_id
