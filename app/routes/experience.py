# app/routes/experience.py
from app.models import Experience
from app.routes.crud import crud_blueprint
from app.schemas import ExperienceSchema
import app.databases as databases

# newest position first
experience_bp = crud_blueprint(
    "experiences", "/api/experiences", Experience, ExperienceSchema, databases.experience_to_dict,
    "experience", order_by=(Experience.start_date.desc(), Experience.id.desc()),
)
