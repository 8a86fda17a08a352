# backend/routes/auth.py
import logging
import secrets

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from models.users import User, ROLES
from schemas import user as schemas
from schemas.base import MessageResponse
from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import create_access_token

router = APIRouter(tags=["Auth"])
logger = logging.getLogger(__name__)


# Register a new account; students start unapproved
@router.post("/signup", response_model=schemas.SignupResponse)
def signup(payload: schemas.SignupRequest, db: Session = Depends(get_db)):
    try:
        # Early read keeps "username taken" ahead of the other checks,
        # the unique constraint below is what actually guarantees it
        db_user = db.query(User).filter(User.username == payload.username).first()
        if db_user:
            raise HTTPException(status_code=400, detail="Username already exists")

        if payload.role not in ROLES:
            raise HTTPException(status_code=400, detail="Invalid role")

        if payload.password != payload.password_confirmation:
            raise HTTPException(status_code=400, detail="Passwords do not match")

        new_user = User(
            fullname=payload.fullname,
            username=payload.username,
            password_hash=get_password_hash(payload.password),
            role=payload.role,
            approved=payload.role != "student",
        )
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except IntegrityError:
        # Lost a race against a concurrent signup for the same username
        db.rollback()
        raise HTTPException(status_code=400, detail="Username already exists")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error in signup")
        raise HTTPException(status_code=500, detail="Error in signup")

    logger.info("New %s account created: %s", new_user.role, new_user.username)
    return {
        "message": "Signup successful",
        "role": new_user.role,
        "username": new_user.username,
        "approved": new_user.approved,
    }


# Check credentials of a stored account; no token is issued
@router.post("/login", response_model=schemas.LoginResponse)
def login(payload: schemas.LoginRequest, db: Session = Depends(get_db)):
    try:
        db_user = db.query(User).filter(User.username == payload.username).first()
    except SQLAlchemyError:
        logger.exception("Error in login")
        raise HTTPException(status_code=500, detail="Error in login")

    if not db_user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    # Approval is checked before the password
    if not db_user.approved:
        logger.info("Login refused for unapproved user %s", db_user.username)
        raise HTTPException(status_code=401, detail="User not yet approved")

    if not verify_password(payload.password, db_user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return {"message": "Login successful", "role": db_user.role, "username": db_user.username}


# Admin credentials come from settings, not from the users table
@router.post("/admin/login", response_model=schemas.AdminLoginResponse)
def admin_login(payload: schemas.LoginRequest):
    username_ok = secrets.compare_digest(payload.username.encode("utf-8"), settings.ADMIN_USERNAME.encode("utf-8"))
    password_ok = secrets.compare_digest(payload.password.encode("utf-8"), settings.ADMIN_PASSWORD.encode("utf-8"))
    if not (username_ok and password_ok):
        logger.warning("Failed admin login attempt for %s", payload.username)
        raise HTTPException(status_code=401, detail="Invalid admin credentials")

    session_id = create_access_token(data={"sub": settings.ADMIN_USERNAME, "role": "admin"})
    return {
        "message": "Admin login successful",
        "role": "admin",
        "username": settings.ADMIN_USERNAME,
        "sessionID": session_id,
    }


# Sessions are not tracked server side, so there is nothing to clear
@router.post("/logout", response_model=MessageResponse)
def logout():
    return {"message": "Logout successful"}
