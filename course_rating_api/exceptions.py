class CourseRatingAPIError(Exception):
    eng: str
    ru: str

    def __init__(self, eng: str, ru: str) -> None:
        self.eng = eng
        self.ru = ru
        super().__init__(eng)


class ObjectNotFound(CourseRatingAPIError):
    def __init__(self, obj: type, obj_id_or_name: int | str):
        super().__init__(
            f"Object {obj.__name__} {obj_id_or_name=} not found",
            f"Объект {obj.__name__} с идентификатором {obj_id_or_name} не найден",
        )


class InvalidInput(CourseRatingAPIError):
    def __init__(self, msg: str):
        super().__init__(
            f"Invalid ranking input: {msg}",
            f"Некорректные входные данные для рейтинга: {msg}",
        )


class NumericDomainError(CourseRatingAPIError):
    value: float

    def __init__(self, name: str, value: float):
        self.value = value
        super().__init__(
            f"Membership {name}={value} is outside of [0, 1]",
            f"Значение принадлежности {name}={value} вне отрезка [0, 1]",
        )


class DataSourceError(CourseRatingAPIError):
    def __init__(self, msg: str):
        super().__init__(
            f"Ranking data source failed: {msg}",
            f"Ошибка источника данных рейтинга: {msg}",
        )
