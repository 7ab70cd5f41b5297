"""Destination cities served from the Moscow warehouse.

Rows are (name, carrier code, zone, region). Several cities were listed twice
in the upstream table with different carrier codes; the later code is kept here.
"""

CITY_ROWS = (
    # zone1
    ("Москва", 77, "zone1", "Москва"),
    ("Зеленоград", 77, "zone1", "Москва"),
    ("Троицк", 77, "zone1", "Москва"),
    ("Щербинка", 77, "zone1", "Москва"),
    ("Балашиха", 50, "zone1", "Московская область"),
    ("Химки", 50, "zone1", "Московская область"),
    ("Королев", 50, "zone1", "Московская область"),
    ("Мытищи", 50, "zone1", "Московская область"),
    ("Подольск", 50, "zone1", "Московская область"),
    ("Люберцы", 50, "zone1", "Московская область"),
    ("Электросталь", 50, "zone1", "Московская область"),
    ("Коломна", 50, "zone1", "Московская область"),
    ("Серпухов", 50, "zone1", "Московская область"),
    ("Одинцово", 50, "zone1", "Московская область"),
    ("Домодедово", 50, "zone1", "Московская область"),
    ("Жуковский", 50, "zone1", "Московская область"),
    ("Орехово-Зуево", 50, "zone1", "Московская область"),
    ("Ногинск", 50, "zone1", "Московская область"),
    ("Клин", 50, "zone1", "Московская область"),
    ("Воскресенск", 50, "zone1", "Московская область"),
    ("Егорьевск", 50, "zone1", "Московская область"),
    ("Красногорск", 50, "zone1", "Московская область"),
    ("Лобня", 50, "zone1", "Московская область"),
    ("Ступино", 50, "zone1", "Московская область"),
    ("Щелково", 50, "zone1", "Московская область"),
    ("Раменское", 50, "zone1", "Московская область"),
    ("Долгопрудный", 50, "zone1", "Московская область"),
    ("Пушкино", 50, "zone1", "Московская область"),
    ("Дмитров", 50, "zone1", "Московская область"),
    ("Реутов", 50, "zone1", "Московская область"),

    # zone2
    ("Калуга", 40, "zone2", "Калужская область"),
    ("Обнинск", 40, "zone2", "Калужская область"),
    ("Тула", 71, "zone2", "Тульская область"),
    ("Новомосковск", 71, "zone2", "Тульская область"),
    ("Рязань", 62, "zone2", "Рязанская область"),
    ("Касимов", 62, "zone2", "Рязанская область"),
    ("Владимир", 33, "zone2", "Владимирская область"),
    ("Ковров", 33, "zone2", "Владимирская область"),
    ("Муром", 33, "zone2", "Владимирская область"),
    ("Тверь", 69, "zone2", "Тверская область"),
    ("Ржев", 69, "zone2", "Тверская область"),
    ("Торжок", 69, "zone2", "Тверская область"),
    ("Иваново", 37, "zone2", "Ивановская область"),
    ("Кинешма", 37, "zone2", "Ивановская область"),
    ("Ярославль", 76, "zone2", "Ярославская область"),
    ("Рыбинск", 76, "zone2", "Ярославская область"),
    ("Кострома", 44, "zone2", "Костромская область"),

    # zone3
    ("Санкт-Петербург", 137, "zone3", "Санкт-Петербург"),
    ("Колпино", 78, "zone3", "Санкт-Петербург"),
    ("Пушкин", 78, "zone3", "Санкт-Петербург"),
    ("Выборг", 47, "zone3", "Ленинградская область"),
    ("Гатчина", 47, "zone3", "Ленинградская область"),
    ("Всеволожск", 47, "zone3", "Ленинградская область"),
    ("Белгород", 565, "zone3", "Белгородская область"),
    ("Старый Оскол", 31, "zone3", "Белгородская область"),
    ("Бирюч", 1015, "zone3", "Белгородская область"),
    ("Воронеж", 193, "zone3", "Воронежская область"),
    ("Борисоглебск", 36, "zone3", "Воронежская область"),
    ("Курск", 20, "zone3", "Курская область"),
    ("Железногорск", 46, "zone3", "Курская область"),
    ("Липецк", 25, "zone3", "Липецкая область"),
    ("Елец", 48, "zone3", "Липецкая область"),
    ("Орел", 256, "zone3", "Орловская область"),
    ("Ливны", 57, "zone3", "Орловская область"),
    ("Тамбов", 6, "zone3", "Тамбовская область"),
    ("Мичуринск", 68, "zone3", "Тамбовская область"),
    ("Брянск", 191, "zone3", "Брянская область"),
    ("Клинцы", 32, "zone3", "Брянская область"),
    ("Смоленск", 146, "zone3", "Смоленская область"),
    ("Вязьма", 67, "zone3", "Смоленская область"),
    ("Починок", 899, "zone3", "Смоленская область"),
    ("Архангельск", 18, "zone3", "Архангельская область"),
    ("Северодвинск", 29, "zone3", "Архангельская область"),
    ("Котлас", 29, "zone3", "Архангельская область"),
    ("Великий Новгород", 142, "zone3", "Новгородская область"),
    ("Боровичи", 53, "zone3", "Новгородская область"),
    ("Вологда", 151, "zone3", "Вологодская область"),
    ("Череповец", 35, "zone3", "Вологодская область"),
    ("Калининград", 152, "zone3", "Калининградская область"),
    ("Балтийск", 39, "zone3", "Калининградская область"),
    ("Петрозаводск", 1094, "zone3", "Республика Карелия"),
    ("Костомукша", 10, "zone3", "Республика Карелия"),
    ("Псков", 1095, "zone3", "Псковская область"),
    ("Великие Луки", 60, "zone3", "Псковская область"),
    ("Мурманск", 1097, "zone3", "Мурманская область"),
    ("Апатиты", 51, "zone3", "Мурманская область"),
    ("Североморск", 51, "zone3", "Мурманская область"),
    ("Сыктывкар", 1096, "zone3", "Республика Коми"),
    ("Ухта", 11, "zone3", "Республика Коми"),
    ("Воркута", 11, "zone3", "Республика Коми"),
    ("Нарьян-Мар", 83, "zone3", "Ненецкий автономный округ"),

    # zone4
    ("Нижний Новгород", 24, "zone4", "Нижегородская область"),
    ("Казань", 172, "zone4", "Республика Татарстан"),
    ("Самара", 51, "zone4", "Самарская область"),
    ("Саратов", 243, "zone4", "Саратовская область"),
    ("Ульяновск", 195, "zone4", "Ульяновская область"),
    ("Пенза", 49, "zone4", "Пензенская область"),
    ("Киров", 254, "zone4", "Кировская область"),
    ("Чебоксары", 45, "zone4", "Чувашская Республика"),
    ("Йошкар-Ола", 1108, "zone4", "Республика Марий Эл"),
    ("Саранск", 1109, "zone4", "Республика Мордовия"),
    ("Тольятти", 969, "zone4", "Самарская область"),
    ("Астрахань", 17, "zone4", "Астраханская область"),
    ("Волгоград", 23, "zone4", "Волгоградская область"),
    ("Краснодар", 35, "zone4", "Краснодарский край"),
    ("Ростов-на-Дону", 39, "zone4", "Ростовская область"),
    ("Сочи", 1438, "zone4", "Краснодарский край"),
    ("Ставрополь", 37, "zone4", "Ставропольский край"),
    ("Махачкала", 1106, "zone4", "Республика Дагестан"),
    ("Грозный", 1100, "zone4", "Чеченская Республика"),
    ("Владикавказ", 1099, "zone4", "РСО-Алания"),
    ("Симферополь", 1499, "zone4", "Республика Крым"),
    ("Севастополь", 1438, "zone4", "Севастополь"),
    ("Екатеринбург", 250, "zone4", "Свердловская область"),
    ("Челябинск", 56, "zone4", "Челябинская область"),
    ("Уфа", 102, "zone4", "Республика Башкортостан"),
    ("Пермь", 48, "zone4", "Пермский край"),
    ("Ижевск", 7, "zone4", "Удмуртская Республика"),
    ("Оренбург", 67, "zone4", "Оренбургская область"),
    ("Курган", 1110, "zone4", "Курганская область"),
    ("Тюмень", 81, "zone4", "Тюменская область"),

    # zone5
    ("Новосибирск", 54, "zone5", "Новосибирская область"),
    ("Барабинск", 54, "zone5", "Новосибирская область"),
    ("Бердск", 54, "zone5", "Новосибирская область"),
    ("Омск", 55, "zone5", "Омская область"),
    ("Тара", 55, "zone5", "Омская область"),
    ("Красноярск", 24, "zone5", "Красноярский край"),
    ("Норильск", 24, "zone5", "Красноярский край"),
    ("Ачинск", 24, "zone5", "Красноярский край"),
    ("Канск", 24, "zone5", "Красноярский край"),
    ("Минусинск", 24, "zone5", "Красноярский край"),
    ("Иркутск", 38, "zone5", "Иркутская область"),
    ("Братск", 38, "zone5", "Иркутская область"),
    ("Ангарск", 38, "zone5", "Иркутская область"),
    ("Усть-Илимск", 38, "zone5", "Иркутская область"),
    ("Кемерово", 42, "zone5", "Кемеровская область"),
    ("Новокузнецк", 42, "zone5", "Кемеровская область"),
    ("Прокопьевск", 42, "zone5", "Кемеровская область"),
    ("Междуреченск", 42, "zone5", "Кемеровская область"),
    ("Томск", 70, "zone5", "Томская область"),
    ("Северск", 70, "zone5", "Томская область"),
    ("Стрежевой", 70, "zone5", "Томская область"),
    ("Барнаул", 22, "zone5", "Алтайский край"),
    ("Бийск", 22, "zone5", "Алтайский край"),
    ("Рубцовск", 22, "zone5", "Алтайский край"),
    ("Новоалтайск", 22, "zone5", "Алтайский край"),
    ("Улан-Удэ", 3, "zone5", "Республика Бурятия"),
    ("Северобайкальск", 3, "zone5", "Республика Бурятия"),
    ("Чита", 75, "zone5", "Забайкальский край"),
    ("Краснокаменск", 75, "zone5", "Забайкальский край"),
    ("Борзя", 75, "zone5", "Забайкальский край"),
    ("Абакан", 19, "zone5", "Республика Хакасия"),
    ("Черногорск", 19, "zone5", "Республика Хакасия"),
    ("Кызыл", 17, "zone5", "Республика Тыва"),
    ("Горно-Алтайск", 4, "zone5", "Республика Алтай"),
    ("Якутск", 14, "zone5", "Республика Саха (Якутия)"),
    ("Мирный", 14, "zone5", "Республика Саха (Якутия)"),
    ("Нерюнгри", 14, "zone5", "Республика Саха (Якутия)"),
    ("Ленск", 14, "zone5", "Республика Саха (Якутия)"),
    ("Хабаровск", 27, "zone5", "Хабаровский край"),
    ("Комсомольск-на-Амуре", 27, "zone5", "Хабаровский край"),
    ("Амурск", 27, "zone5", "Хабаровский край"),
    ("Советская Гавань", 27, "zone5", "Хабаровский край"),
    ("Владивосток", 25, "zone5", "Приморский край"),
    ("Уссурийск", 25, "zone5", "Приморский край"),
    ("Находка", 25, "zone5", "Приморский край"),
    ("Артем", 25, "zone5", "Приморский край"),
    ("Дальнегорск", 25, "zone5", "Приморский край"),
    ("Благовещенск", 28, "zone5", "Амурская область"),
    ("Белогорск", 28, "zone5", "Амурская область"),
    ("Свободный", 28, "zone5", "Амурская область"),
    ("Тында", 28, "zone5", "Амурская область"),
    ("Магадан", 49, "zone5", "Магаданская область"),
    ("Сусуман", 49, "zone5", "Магаданская область"),
    ("Петропавловск-Камчатский", 41, "zone5", "Камчатский край"),
    ("Елизово", 41, "zone5", "Камчатский край"),
    ("Вилючинск", 41, "zone5", "Камчатский край"),
    ("Южно-Сахалинск", 65, "zone5", "Сахалинская область"),
    ("Корсаков", 65, "zone5", "Сахалинская область"),
    ("Холмск", 65, "zone5", "Сахалинская область"),
    ("Оха", 65, "zone5", "Сахалинская область"),
    ("Курильск", 65, "zone5", "Сахалинская область"),
    ("Биробиджан", 79, "zone5", "Еврейская автономная область"),
    ("Анадырь", 87, "zone5", "Чукотский автономный округ"),
    ("Певек", 87, "zone5", "Чукотский автономный округ"),
    ("Билибино", 87, "zone5", "Чукотский автономный округ"),
)
