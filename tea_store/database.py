# tea_store/database.py

from typing import List

from .models import TeaOrder


class TeaStore:
    """
    Хранилище заказов в памяти процесса: упорядоченный список и счётчик id.
    Создаётся один раз на приложение (см. main.create_app), при перезапуске всё теряется.
    """

    def __init__(self) -> None:
        self.teas: List[TeaOrder] = []
        self.next_id: int = 1

    def allocate_id(self) -> int:
        """
        Выдаёт очередной id. Счётчик только растёт, удалённые id повторно не выдаются.
        """
        tea_id = self.next_id
        self.next_id += 1
        return tea_id
