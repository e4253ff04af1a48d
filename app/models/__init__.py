from .user import User, AuthSession
from .profile import Profile
from .skill import Skill
from .project import Project
from .experience import Experience
from .social import Social
from .resume import Resume
from .contact import Contact, Feedback
from .blog import BlogPost, BlogComment
from .visitor import VisitorCounter, VisitorLog
from .reading_reward import ReadingReward

__all__ = [
    "User",
    "AuthSession",
    "Profile",
    "Skill",
    "Project",
    "Experience",
    "Social",
    "Resume",
    "Contact",
    "Feedback",
    "BlogPost",
    "BlogComment",
    "VisitorCounter",
    "VisitorLog",
    "ReadingReward"
]
