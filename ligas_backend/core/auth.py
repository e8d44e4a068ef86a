from fastapi import APIRouter, Depends
from sqlmodel import Session, select
from passlib.context import CryptContext

from ligas_backend.core import config
from ligas_backend.core.database import get_session
from ligas_backend.core.exceptions import InvalidArgument, Unauthorized
from ligas_backend.core.logger import setup_logger
from ligas_backend.core.security import issue_token
from ligas_backend.models.user_model import User, UserRegister, UserLogin, TokenResponse

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
logger = setup_logger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def find_user(session: Session, email: str):
    return session.exec(select(User).where(User.email == normalize_email(email))).first()


# === REGISTER ===

@router.post("/register", status_code=201)
def register_user(data: UserRegister, session: Session = Depends(get_session)):
    """Creates a user with the default ROLE_USER role. Public endpoint."""
    if find_user(session, data.email):
        raise InvalidArgument("email already registered")

    user = User(
        email=normalize_email(data.email),
        name=data.name.strip(),
        password_hash=pwd_context.hash(data.password),
        roles=[config.ROLE_USER],
    )
    session.add(user)
    session.commit()
    logger.info(f"Registered user {user.email}")

    return {"message": "User registered"}


# === LOGIN ===

@router.post("/login", response_model=TokenResponse)
def login_user(data: UserLogin, session: Session = Depends(get_session)):
    """Verifies credentials and returns a signed bearer token. Public endpoint."""
    user = find_user(session, data.email)
    if not user:
        raise Unauthorized("invalid credentials")

    if not pwd_context.verify(data.password, user.password_hash):
        raise Unauthorized("invalid credentials")

    return TokenResponse(token=issue_token(user.email, user.roles))
