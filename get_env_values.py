import os
from dotenv import load_dotenv


load_dotenv()


# Signature enforcement is off while no secret is configured
SOFKA_SECRET = os.getenv("SOFKA_SECRET", "")
# Empty means the catalog bundled with the package
CATALOG_PATH = os.getenv("CATALOG_PATH", "")
