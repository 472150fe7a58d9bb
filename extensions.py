from flask_sqlalchemy import SQLAlchemy

# Инициализация расширений без привязки к конкретному приложению

# База данных: пул соединений живёт в engine, сессия снимается в teardown контекста
db = SQLAlchemy()
