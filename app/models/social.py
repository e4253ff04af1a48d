from app.extensions import db


class Social(db.Model):
    __tablename__ = "socials"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    icon = db.Column(db.Text, nullable=False)  # raw SVG markup
