# app/utils/retry.py
from sqlalchemy.exc import OperationalError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from app.utils.settings import DB_RETRY_ATTEMPTS


#tenacity retry, tylko bledy przejsciowe bazy (np. sqlite "database is locked")
#IntegrityError itp. nie sa powtarzane
def db_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(DB_RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        retry=retry_if_exception_type(OperationalError),
    )
