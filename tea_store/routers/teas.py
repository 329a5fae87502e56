# tea_store/routers/teas.py

from typing import List
from fastapi import APIRouter, Depends, Request

from tea_store import crud, schemas
from tea_store.database import TeaStore
from tea_store.exceptions import TeaNotFound

router = APIRouter(prefix="/tea", tags=["tea"])


def get_store(request: Request) -> TeaStore:
    return request.app.state.store


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_tea_body(request: Request) -> schemas.TeaOrderIn:
    """
    Тело запроса читается нестрого: не-JSON, битый JSON или не объект (например, массив)
    дают пустое тело, то есть name и price будут None. Ошибки 422 здесь не бывает.
    """
    payload = {}
    if _is_json(request.headers.get("content-type", "")):
        try:
            payload = await request.json()
        except ValueError:
            payload = {}
    if not isinstance(payload, dict):
        payload = {}
    return schemas.TeaOrderIn.model_validate(payload)


@router.post("", response_model=schemas.TeaOrderRead, status_code=201)
async def create_tea(
        tea: schemas.TeaOrderIn = Depends(read_tea_body),
        store: TeaStore = Depends(get_store),
):
    return crud.create_tea(store, tea)


@router.get("", response_model=List[schemas.TeaOrderRead])
async def read_teas(store: TeaStore = Depends(get_store)):
    return crud.get_teas(store)


@router.get("/{tea_id}", response_model=schemas.TeaOrderRead)
async def read_tea(tea_id: str, store: TeaStore = Depends(get_store)):
    db_item = crud.get_tea(store, crud.parse_tea_id(tea_id))
    if db_item is None:
        raise TeaNotFound(tea_id)
    return db_item


@router.put("/{tea_id}", response_model=schemas.TeaOrderRead)
async def update_tea(
        tea_id: str,
        tea_upd: schemas.TeaOrderIn = Depends(read_tea_body),
        store: TeaStore = Depends(get_store),
):
    updated = crud.update_tea(store, crud.parse_tea_id(tea_id), tea_upd)
    if updated is None:
        raise TeaNotFound(tea_id)
    return updated


@router.delete("/{tea_id}", response_model=List[schemas.TeaOrderRead])
async def delete_tea(tea_id: str, store: TeaStore = Depends(get_store)):
    remaining = crud.delete_tea(store, crud.parse_tea_id(tea_id))
    if remaining is None:
        raise TeaNotFound(tea_id)
    return remaining
