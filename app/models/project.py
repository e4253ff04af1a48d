from app.extensions import db


class Project(db.Model):
    __tablename__ = "projects"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False)
    tags = db.Column(db.JSON, nullable=False, default=list)
    image = db.Column(db.String(500), nullable=False)
    demo_url = db.Column(db.String(500))
    github_url = db.Column(db.String(500))
