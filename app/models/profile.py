from app.extensions import db


class Profile(db.Model):
    __tablename__ = "profile"

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    bio = db.Column(db.Text, nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    avatar_url = db.Column(db.String(500), nullable=False)
    header_image = db.Column(db.String(500), nullable=False)
