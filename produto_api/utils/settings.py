# produto_api/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

#connection string - jedyna wartosc konfiguracji wymagana przez kontekst bazy
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./produto.db")

#sql albo memory, wybierane przy starcie przez DI
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql").strip().lower()

CREATE_TABLES_ON_STARTUP = os.getenv("CREATE_TABLES_ON_STARTUP", "true").strip().lower() in ("1", "true", "yes")
DB_CONNECT_ATTEMPTS = int(os.getenv("DB_CONNECT_ATTEMPTS", 5))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))
