from utils.text import clean_line, normalize


def test_normalize_folds_ukrainian_letters():
    assert normalize("Київ") == "киiв"
    assert normalize("КИЇВ") == normalize("київ")
    assert normalize("Запоріжжя Ґалаґан Єнакієве") == "запорiжжя gалаgан eнакieве"


def test_normalize_unifies_apostrophes():
    assert normalize("Кам’янське") == normalize("Камʼянське") == normalize("Кам'янське")
    assert normalize("Куп`янськ") == "куп'янськ"


def test_normalize_empty():
    assert normalize("") == ""
    assert normalize(None) == ""


def test_normalize_is_idempotent():
    text = "3 БпЛА на Київ, Ірпінь"
    assert normalize(normalize(text)) == normalize(text)


def test_clean_line_strips_urls():
    assert clean_line("2 БпЛА на Суми (https://t.me/x/1)") == "2 БпЛА на Суми"
    assert clean_line("БпЛА на Київ https://example.com/a?b=1") == "БпЛА на Київ"


def test_clean_line_strips_pictographs_and_punctuation():
    assert clean_line("➡️ 2 БпЛА на Суми!!!") == "2 БпЛА на Суми"
    assert clean_line("⚡️ Ракета на Дніпро ❤️") == "Ракета на Дніпро"
    assert clean_line("**БпЛА** на _Полтаву_") == "БпЛА на Полтаву"


def test_clean_line_keeps_hyphen():
    assert clean_line("БпЛА на Івано-Франківськ.") == "БпЛА на Івано-Франківськ"


def test_clean_line_noise_only():
    assert clean_line("➡️ ⚡️ !!!") == ""


def test_clean_line_drops_apostrophes_inside_words():
    assert clean_line("БпЛА на Кам’янське") == "БпЛА на Камянське"
