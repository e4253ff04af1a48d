# app/routes/skills.py
import logging

from flask import request, jsonify
from sqlalchemy import func

from app.models import Skill
from app.routes.crud import crud_blueprint
from app.schemas import SkillSchema
import app.databases as databases

logger = logging.getLogger(__name__)

skills_bp = crud_blueprint(
    "skills", "/api/skills", Skill, SkillSchema, databases.skill_to_dict, "skill",
    order_by=(Skill.category, Skill.level.desc(), Skill.id),
)


@skills_bp.route('/autocomplete', methods=['GET'])
def autocomplete_skills():
    query = request.args.get('q', '').strip().lower()

    if not query:
        return jsonify({'data': []})

    # skill names containing the query (case insensitive), one entry per name
    names = (
        Skill.query.with_entities(Skill.name)
        .filter(func.lower(Skill.name).like(f"%{query}%"))
        .distinct()
        .order_by(Skill.name)
        .limit(15)
        .all()
    )

    results = [{"name": row.name, "type": "skill"} for row in names]
    logger.debug(f"🔍 {len(results)} skill suggestions for '{query}'")
    return jsonify({'data': results})
