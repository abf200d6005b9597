from sportcenter.models.user import User
from sportcenter.models.sport import Sport
from sportcenter.models.schedule import Schedule
from sportcenter.models.membership import Membership
from sportcenter.models.payment import Payment
from sportcenter.models.site_content import SocialMediaLink, ContactInfo
from sportcenter.models.statistic import Statistic

# This makes the models directory a Python package and ensures all models are loaded
