# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here guarantees
# that Base.metadata knows every table before create_all() runs.

from .base_class import Base

from .models.user_model import User
from .models.blog_models import Blog, Article
from .models.analytics_models import AnalyticsEvent
from .models.chat_models import ChatMessage
