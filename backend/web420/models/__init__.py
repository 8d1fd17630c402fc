# Models package init
"""
Importing this package registers every table on Base.metadata, which
Alembic autogenerate and the test fixtures' create_all() rely on.
"""

from web420.models.composer import Composer
from web420.models.customer import Customer
from web420.models.person import Person
from web420.models.team import Team
from web420.models.user import User

__all__ = ["Composer", "Customer", "Person", "Team", "User"]
