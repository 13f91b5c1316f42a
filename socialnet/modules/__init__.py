"""
Modules package initialization.
This package contains all the functional modules of the application.
"""

from socialnet.modules import auth
from socialnet.modules import user_management
from socialnet.modules import posts
