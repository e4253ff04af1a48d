# app/routes/socials.py
from app.models import Social
from app.routes.crud import crud_blueprint
from app.schemas import SocialSchema
import app.databases as databases

socials_bp = crud_blueprint(
    "socials", "/api/socials", Social, SocialSchema, databases.social_to_dict, "social link",
)
