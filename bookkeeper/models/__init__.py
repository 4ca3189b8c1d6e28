# Models Package
# MVC Model Layer - Pydantic Models

from .master import *
from .transaction import *
from .report import *
from .book import *
