from dotenv import load_dotenv
import os

load_dotenv()

# Пустая строка в PORT тоже означает «по умолчанию»
PORT = int(os.getenv("PORT") or 3000)
HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()
