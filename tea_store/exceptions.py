NOT_FOUND_MESSAGE = "Tea Not Found!!"


class TeaNotFound(Exception):
    """Заказ с таким id не найден. Отдаётся клиенту как 404 с текстом NOT_FOUND_MESSAGE."""

    def __init__(self, tea_id: str):
        super().__init__(NOT_FOUND_MESSAGE)
        self.tea_id = tea_id
