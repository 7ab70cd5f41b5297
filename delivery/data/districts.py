"""Logical district groupings used by the storefront's city picker.

Some names listed here have no carrier entry in CITY_ROWS yet; they are
skipped when a district is listed.
"""

DISTRICT_ROWS = (
    (
        "Москва и область",
        "Москва и Московская область (зона 1)",
        (
            "Москва", "Зеленоград", "Троицк", "Щербинка",
            "Балашиха", "Химки", "Королев", "Мытищи",
            "Подольск", "Люберцы", "Электросталь",
            "Коломна", "Серпухов", "Одинцово",
            "Домодедово", "Жуковский", "Орехово-Зуево",
            "Ногинск", "Клин", "Воскресенск",
            "Егорьевск", "Красногорск", "Лобня",
            "Ступино", "Щелково", "Раменское",
            "Долгопрудный", "Пушкино", "Дмитров",
            "Реутов",
        ),
    ),
    (
        "Ближний ЦФО",
        "Ближайшие области Центрального округа (зона 2)",
        (
            "Калуга", "Обнинск", "Тула", "Новомосковск",
            "Рязань", "Касимов", "Владимир", "Ковров",
            "Муром", "Тверь", "Ржев", "Торжок", "Иваново",
            "Кинешма", "Ярославль", "Рыбинск",
            "Кострома",
        ),
    ),
    (
        "ЦФО и СЗФО",
        "Остальной ЦФО и Северо-Западный округ (зона 3)",
        (
            "Санкт-Петербург", "Колпино", "Пушкин",
            "Выборг", "Гатчина", "Всеволожск",
            "Белгород", "Старый Оскол", "Бирюч",
            "Воронеж", "Борисоглебск", "Курск",
            "Железногорск", "Липецк", "Елец", "Орел",
            "Ливны", "Тамбов", "Мичуринск", "Брянск",
            "Клинцы", "Смоленск", "Вязьма", "Починок",
            "Архангельск", "Северодвинск", "Котлас",
            "Великий Новгород", "Боровичи", "Вологда",
            "Череповец", "Калининград", "Балтийск",
            "Петрозаводск", "Костомукша", "Псков",
            "Великие Луки", "Мурманск", "Апатиты",
            "Североморск", "Сыктывкар", "Ухта",
            "Воркута", "Нарьян-Мар",
        ),
    ),
    (
        "Поволжье, Юг, Урал",
        "Приволжский, Южный, Северо-Кавказский, Уральский округа (зона 4)",
        (
            "Нижний Новгород", "Дзержинск", "Арзамас",
            "Казань", "Набережные Челны",
            "Альметьевск", "Самара", "Тольятти",
            "Сызрань", "Саратов", "Энгельс", "Балаково",
            "Ульяновск", "Димитровград", "Пенза",
            "Кузнецк", "Киров", "Кирово-Чепецк",
            "Чебоксары", "Новочебоксарск",
            "Йошкар-Ола", "Саранск", "Ижевск",
            "Воткинск", "Уфа", "Стерлитамак", "Салават",
            "Пермь", "Березники", "Соликамск",
            "Оренбург", "Орск", "Новотроицк",
            "Ростов-на-Дону", "Таганрог",
            "Новочеркасск", "Шахты", "Волгоград",
            "Волжский", "Камышин", "Краснодар", "Сочи",
            "Новороссийск", "Армавир", "Астрахань",
            "Элиста", "Симферополь", "Севастополь",
            "Керчь", "Евпатория", "Ялта", "Ставрополь",
            "Пятигорск", "Кисловодск", "Ессентуки",
            "Невинномысск", "Махачкала", "Дербент",
            "Каспийск", "Грозный", "Владикавказ",
            "Нальчик", "Черкесск", "Магас", "Майкоп",
            "Екатеринбург", "Нижний Тагил",
            "Каменск-Уральский", "Первоуральск",
            "Челябинск", "Магнитогорск", "Златоуст",
            "Миасс", "Тюмень", "Тобольск", "Курган",
            "Шадринск", "Ханты-Мансийск", "Сургут",
            "Нижневартовск", "Нефтеюганск", "Салехард",
            "Новый Уренгой", "Ноябрьск",
        ),
    ),
    (
        "Сибирь и Дальний Восток",
        "Сибирский и Дальневосточный федеральные округа (зона 5)",
        (
            "Новосибирск", "Барабинск", "Бердск", "Омск",
            "Тара", "Красноярск", "Норильск", "Ачинск",
            "Канск", "Минусинск", "Иркутск", "Братск",
            "Ангарск", "Усть-Илимск", "Кемерово",
            "Новокузнецк", "Прокопьевск",
            "Междуреченск", "Томск", "Северск",
            "Стрежевой", "Барнаул", "Бийск", "Рубцовск",
            "Новоалтайск", "Улан-Удэ",
            "Северобайкальск", "Чита", "Краснокаменск",
            "Борзя", "Абакан", "Черногорск", "Кызыл",
            "Горно-Алтайск", "Якутск", "Мирный",
            "Нерюнгри", "Ленск", "Хабаровск",
            "Комсомольск-на-Амуре", "Амурск",
            "Советская Гавань", "Владивосток",
            "Уссурийск", "Находка", "Артем",
            "Дальнегорск", "Благовещенск", "Белогорск",
            "Свободный", "Тында", "Магадан", "Сусуман",
            "Петропавловск-Камчатский", "Елизово",
            "Вилючинск", "Южно-Сахалинск", "Корсаков",
            "Холмск", "Оха", "Курильск", "Биробиджан",
            "Анадырь", "Певек", "Билибино",
        ),
    ),
)
