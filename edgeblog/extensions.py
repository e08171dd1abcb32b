# edgeblog/extensions.py
from flask_cors import CORS
from flask_mail import Mail
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

from edgeblog.services.blob_store import BlobStore

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()
mail = Mail()
blob_store = BlobStore()
