from sqlalchemy import JSON, Column, Integer, Text
from advocate_directory.database import Base


class Advocate(Base):
    __tablename__ = "advocates"

    id = Column(Integer, primary_key=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    city = Column(Text, nullable=False)
    degree = Column(Text, nullable=False)
    specialties = Column(JSON, nullable=False, default=list)
    years_of_experience = Column(Integer, nullable=False)
    phone_number = Column(Integer, nullable=False)
    created_at = Column(Text, nullable=False)
