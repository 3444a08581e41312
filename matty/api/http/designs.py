from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from matty.api.gates import authenticate, parse_body, validate
from matty.core.db import get_db
from matty.core.exceptions import NotFound
from matty.core.pipeline import Pipeline, RequestContext
from matty.core.responses import message_response, success_response
from matty.domains.designs.schemas import DesignCreate, DesignUpdate
from matty.domains.designs.services import DesignService, parse_design_id

router = APIRouter(prefix="/api/designs", tags=["designs"])

protected = Pipeline(authenticate)
create_pipeline = protected.then(parse_body, validate(DesignCreate))
update_pipeline = protected.then(parse_body, validate(DesignUpdate, partial=True))


async def list_designs_handler(context: RequestContext) -> Response:
    designs = await DesignService(context.session).list_designs(context.identity)
    return success_response([design.to_dict() for design in designs])


async def get_design_handler(context: RequestContext) -> Response:
    try:
        design_id = parse_design_id(context.params["id"])
        design = await DesignService(context.session).get_design(design_id, context.identity)
    except NotFound as e:
        return e.to_response()
    return success_response(design.to_dict())


async def create_design_handler(context: RequestContext) -> Response:
    design = await DesignService(context.session).create_design(context.identity, context.body)
    return success_response(design.to_dict(), status_code=status.HTTP_201_CREATED)


async def update_design_handler(context: RequestContext) -> Response:
    try:
        design_id = parse_design_id(context.params["id"])
        design = await DesignService(context.session).update_design(
            design_id,
            context.identity,
            context.body
        )
    except NotFound as e:
        return e.to_response()
    return success_response(design.to_dict())


async def delete_design_handler(context: RequestContext) -> Response:
    try:
        design_id = parse_design_id(context.params["id"])
        await DesignService(context.session).delete_design(design_id, context.identity)
    except NotFound as e:
        return e.to_response()
    return message_response("Design deleted")


@router.get("")
async def list_designs(request: Request, db: AsyncSession = Depends(get_db)):
    """Список дизайнов текущего пользователя"""
    context = RequestContext(request=request, session=db)
    return await protected.run(context, list_designs_handler)


@router.get("/{design_id}")
async def get_design(design_id: str, request: Request, db: AsyncSession = Depends(get_db)):
    """Получение дизайна по id"""
    context = RequestContext(request=request, session=db, params={"id": design_id})
    return await protected.run(context, get_design_handler)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_design(request: Request, db: AsyncSession = Depends(get_db)):
    """Создание дизайна"""
    context = RequestContext(request=request, session=db)
    return await create_pipeline.run(context, create_design_handler)


@router.put("/{design_id}")
async def update_design(design_id: str, request: Request, db: AsyncSession = Depends(get_db)):
    """Обновление дизайна"""
    context = RequestContext(request=request, session=db, params={"id": design_id})
    return await update_pipeline.run(context, update_design_handler)


@router.delete("/{design_id}")
async def delete_design(design_id: str, request: Request, db: AsyncSession = Depends(get_db)):
    """Удаление дизайна"""
    context = RequestContext(request=request, session=db, params={"id": design_id})
    return await protected.run(context, delete_design_handler)
