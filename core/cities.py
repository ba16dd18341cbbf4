"""
Bundled gazetteer: settlement name -> (lat, lng).

Inflected forms that show up in channel posts are listed next to the
nominative name with the same coordinates.
"""

CITIES = {
    # Oblast centres
    "Київ": (50.4501, 30.5234),
    "Києві": (50.4501, 30.5234),
    "Харків": (49.9935, 36.2304),
    "Харкові": (49.9935, 36.2304),
    "Одеса": (46.4825, 30.7233),
    "Одесу": (46.4825, 30.7233),
    "Дніпро": (48.4647, 35.0462),
    "Львів": (49.8397, 24.0297),
    "Запоріжжя": (47.8388, 35.1396),
    "Миколаїв": (46.9750, 31.9946),
    "Херсон": (46.6354, 32.6169),
    "Полтава": (49.5883, 34.5514),
    "Полтаву": (49.5883, 34.5514),
    "Чернігів": (51.4982, 31.2893),
    "Чернігові": (51.4982, 31.2893),
    "Суми": (50.9077, 34.7981),
    "Сумах": (50.9077, 34.7981),
    "Житомир": (50.2547, 28.6587),
    "Вінниця": (49.2331, 28.4682),
    "Вінницю": (49.2331, 28.4682),
    "Черкаси": (49.4444, 32.0598),
    "Кропивницький": (48.5079, 32.2623),
    "Хмельницький": (49.4230, 26.9871),
    "Рівне": (50.6199, 26.2516),
    "Луцьк": (50.7472, 25.3254),
    "Тернопіль": (49.5535, 25.5948),
    "Івано-Франківськ": (48.9226, 24.7111),
    "Ужгород": (48.6208, 22.2879),
    "Чернівці": (48.2915, 25.9403),
    # Sumy oblast
    "Конотоп": (51.2403, 33.2026),
    "Шостка": (51.8633, 33.4698),
    "Шостку": (51.8633, 33.4698),
    "Ромни": (50.7515, 33.4746),
    "Охтирка": (50.3104, 34.8988),
    "Охтирку": (50.3104, 34.8988),
    "Лебедин": (50.5872, 34.4849),
    "Глухів": (51.6781, 33.9164),
    "Кролевець": (51.5487, 33.3847),
    "Тростянець": (50.4783, 34.9657),
    # Chernihiv oblast
    "Ніжин": (51.0480, 31.8869),
    "Прилуки": (50.5934, 32.3876),
    "Бахмач": (51.1808, 32.8261),
    "Короп": (51.5700, 32.9667),
    "Мена": (51.5211, 32.2147),
    "Мену": (51.5211, 32.2147),
    "Новгород-Сіверський": (51.9874, 33.2620),
    "Десна": (50.9370, 30.7470),
    "Десну": (50.9370, 30.7470),
    # Kyiv oblast
    "Бровари": (50.5111, 30.7903),
    "Бориспіль": (50.3527, 30.9551),
    "Біла Церква": (49.8094, 30.1121),
    "Білу Церкву": (49.8094, 30.1121),
    "Вишгород": (50.5846, 30.4891),
    "Обухів": (50.1070, 30.6186),
    "Фастів": (50.0781, 29.9177),
    # Kharkiv oblast
    "Богодухів": (50.1646, 35.5273),
    "Ізюм": (49.2103, 37.2483),
    "Куп'янськ": (49.7106, 37.6156),
    "Балаклія": (49.4627, 36.8598),
    "Балаклію": (49.4627, 36.8598),
    "Лозова": (48.8893, 36.3176),
    "Чугуїв": (49.8356, 36.6880),
    "Вовчанськ": (50.2906, 36.9410),
    # Poltava oblast
    "Кременчук": (49.0659, 33.4204),
    "Миргород": (49.9646, 33.6086),
    "Лубни": (50.0186, 32.9870),
    "Горішні Плавні": (49.0123, 33.6450),
    # Dnipropetrovsk oblast
    "Кривий Ріг": (47.9105, 33.3918),
    "Павлоград": (48.5350, 35.8700),
    "Нікополь": (47.5712, 34.3964),
    "Кам'янське": (48.5076, 34.6132),
    # South
    "Очаків": (46.6123, 31.5425),
    "Вознесенськ": (47.5506, 31.3384),
    "Первомайськ": (48.0440, 30.8500),
    "Ізмаїл": (45.3516, 28.8365),
    "Чорноморськ": (46.3010, 30.6546),
    "Південне": (46.6222, 31.1010),
    # Centre
    "Умань": (48.7484, 30.2218),
    "Сміла": (49.2226, 31.8870),
    "Олександрія": (48.6696, 33.1159),
    "Бердичів": (49.8996, 28.6022),
    "Коростень": (50.9504, 28.6389),
    "Старокостянтинів": (49.7557, 27.2033),
}
