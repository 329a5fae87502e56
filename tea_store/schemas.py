# tea_store/schemas.py

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


class TeaOrderBase(BaseModel):
    # Типы не проверяются: что прислал клиент, то и сохраняем
    name: Optional[Any] = None
    price: Optional[Any] = None


class TeaOrderIn(TeaOrderBase):
    """
    Тело запроса для создания и обновления заказа. Оба поля необязательные,
    отсутствующее поле становится None. Лишние ключи (в том числе id) игнорируются.
    """
    model_config = ConfigDict(extra="ignore")


class TeaOrderRead(TeaOrderBase):
    """
    Схема для выдачи клиенту: к базовым полям добавляем id.
    """
    id: int

    model_config = ConfigDict(from_attributes=True)
