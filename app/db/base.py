from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# upper bound of the INTEGER primary keys
MAX_ID = 2**31 - 1


def is_valid_id(key: int) -> bool:
    return 1 <= key <= MAX_ID
