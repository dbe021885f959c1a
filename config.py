import logging
import os
from dotenv import load_dotenv

load_dotenv()

PROGRAM = 'honoka'

DB_PATH = os.getenv('HONOKA_DB_PATH') or os.path.join(
    os.getenv('HOME', os.path.expanduser('~')), '.local', 'share', PROGRAM, 'data.db'
)

LOG_LEVEL = os.getenv('HONOKA_LOG_LEVEL', 'WARNING').upper()

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, LOG_LEVEL, logging.WARNING)
)
