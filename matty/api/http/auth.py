from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from matty.api.gates import parse_body, validate
from matty.core.db import get_db
from matty.core.pipeline import Pipeline, RequestContext
from matty.core.responses import success_response
from matty.domains.identity.schemas import UserLogin, UserRegister
from matty.domains.identity.services import IdentityService

router = APIRouter(prefix="/api/auth", tags=["authentication"])

register_pipeline = Pipeline(parse_body, validate(UserRegister))
login_pipeline = Pipeline(parse_body, validate(UserLogin))


def _identity_service(context: RequestContext) -> IdentityService:
    return IdentityService(context.session, context.request.app.state.settings)


async def register_handler(context: RequestContext) -> Response:
    user, token = await _identity_service(context).register_user(
        username=context.body["username"],
        email=context.body["email"],
        password=context.body["password"]
    )
    return success_response(
        {"token": token, "user": user.to_dict()},
        status_code=status.HTTP_201_CREATED
    )


async def login_handler(context: RequestContext) -> Response:
    user, token = await _identity_service(context).login_user(
        email=context.body["email"],
        password=context.body["password"]
    )
    return success_response({"token": token, "user": user.to_dict()})


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(request: Request, db: AsyncSession = Depends(get_db)):
    """Регистрация нового пользователя"""
    context = RequestContext(request=request, session=db)
    return await register_pipeline.run(context, register_handler)


@router.post("/login")
async def login(request: Request, db: AsyncSession = Depends(get_db)):
    """Вход пользователя"""
    context = RequestContext(request=request, session=db)
    return await login_pipeline.run(context, login_handler)
