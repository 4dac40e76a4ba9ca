"""User-facing text. The interface speaks Russian."""

COMMAND_PROMPT = "Введите команду (add, load, save, day, week, exit):"
DATE_PROMPT = "Введите дату (например, 2024-09-24 19:00):"
CONTENT_PROMPT = "Введите содержание записи:"
DAY_PROMPT = "Введите дату для поиска (например, 2024-09-24):"
WEEK_PROMPT = "Введите дату начала недели (например, 2024-09-23):"

NOTE_ADDED = "Запись добавлена."
NOTES_SAVED = "Записи сохранены."
LOAD_FAILED = "Ошибка загрузки записей: {error}"
SAVE_FAILED = "Ошибка сохранения записей: {error}"
NO_NOTES = "Нет записей."

UNKNOWN_COMMAND = "Неизвестная команда."
FAREWELL = "Выход из программы."
