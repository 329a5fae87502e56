import logging
import re
from typing import List, Optional

from .database import TeaStore
from .models import TeaOrder
from .schemas import TeaOrderIn

logger = logging.getLogger(__name__)

# Пробелы, знак, затем 0x-префикс с hex-цифрами или обычные десятичные цифры
_INT_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_tea_id(raw: str) -> Optional[int]:
    """
    Разбирает id из пути так же нестрого, как parseInt: берётся целое в начале строки,
    хвост отбрасывается ("12abc" -> 12). Если цифр в начале нет, возвращает None,
    и такой id не совпадает ни с одним заказом.
    """
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        try:
            value = int(digits)
        except ValueError:
            # Слишком длинное число (лимит int_max_str_digits), такого id заведомо нет
            return None
    return -value if sign == "-" else value


def get_tea(store: TeaStore, tea_id: Optional[int]) -> Optional[TeaOrder]:
    """
    Возвращает первый заказ с таким id, или None, если не найден.
    """
    if tea_id is None:
        return None
    return next((tea for tea in store.teas if tea.id == tea_id), None)


def get_teas(store: TeaStore) -> List[TeaOrder]:
    """
    Возвращает все заказы в порядке добавления.
    """
    return list(store.teas)


def create_tea(store: TeaStore, tea: TeaOrderIn) -> TeaOrder:
    new_tea = TeaOrder(id=store.allocate_id(), name=tea.name, price=tea.price)
    store.teas.append(new_tea)
    logger.info("Создан заказ id=%s name=%r", new_tea.id, new_tea.name)
    return new_tea


def update_tea(store: TeaStore, tea_id: Optional[int], tea: TeaOrderIn) -> Optional[TeaOrder]:
    """
    Перезаписывает name и price существующего заказа (даже если в теле их нет), id не меняется.
    Возвращает обновлённый объект или None, если не найден.
    """
    db_item = get_tea(store, tea_id)
    if db_item is None:
        return None

    db_item.name = tea.name
    db_item.price = tea.price
    logger.info("Обновлён заказ id=%s", db_item.id)
    return db_item


def delete_tea(store: TeaStore, tea_id: Optional[int]) -> Optional[List[TeaOrder]]:
    """
    Удаляет ровно один заказ. Возвращает оставшийся список или None, если заказа нет.
    """
    index = next((i for i, tea in enumerate(store.teas) if tea.id == tea_id), None)
    if index is None:
        return None
    del store.teas[index]
    logger.info("Удалён заказ id=%s, осталось %d", tea_id, len(store.teas))
    return get_teas(store)
