from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_bcrypt import Bcrypt
from flask_cors import CORS

cors = CORS()

db = SQLAlchemy()
migrate = Migrate()

# session manager, resolves the session cookie to a user on every request
login_manager = LoginManager()

bcrypt = Bcrypt()
