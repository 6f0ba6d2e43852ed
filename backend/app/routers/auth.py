"""Auth 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import LoginRequest, SessionOut, TokenResponse, UserOut
from app.services.auth_service import create_access_token, mock_sso_login
from app.middleware.auth_middleware import AuthSession, get_current_user, get_session
from app.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = mock_sso_login(db, request.email)
    token = create_access_token(user.user_id)
    logger.info("User %s logged in", user.user_id)
    return TokenResponse(access_token=token, user=UserOut.model_validate(user))


@router.post("/logout")
def logout(session: AuthSession = Depends(get_session)):
    # 토큰은 클라이언트가 폐기한다.
    logger.info("User %s logged out", session.user.user_id)
    return {"message": "로그아웃 되었습니다."}


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user


@router.get("/session", response_model=SessionOut)
def current_session(session: AuthSession = Depends(get_session)):
    return SessionOut(user=UserOut.model_validate(session.user), expires_at=session.expires_at)
