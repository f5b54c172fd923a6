import pytest


@pytest.fixture
def mixed_text():
    return (
        "Daily readings are Быт 1;"
        "Исх 1:2,4;"
        "1 Пет 5-8, 10."
        "Also take a look in:\n             Rev 2,4;"
        "Jh 1:2-4,7"
        "Gen 1:1-2 2:2,5"
    )
