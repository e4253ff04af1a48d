# app/routes/projects.py
from app.models import Project
from app.routes.crud import crud_blueprint
from app.schemas import ProjectSchema
import app.databases as databases

projects_bp = crud_blueprint(
    "projects", "/api/projects", Project, ProjectSchema, databases.project_to_dict, "project",
)
