import pytest

from medcentre.core.config import Settings
from medcentre.manager import SchedulingManager

DATE = "2024-01-10"


@pytest.fixture
def manager():
    return SchedulingManager(settings=Settings(_env_file=None))


@pytest.fixture
def clinic(manager):
    """Manager with two cardiologists, one dermatologist and schedules on DATE."""
    manager.add_specialities("Cardiology", "Dermatology", "Neurology")
    manager.add_doctor("D2", "Mario", "Rossi", "Cardiology")
    manager.add_doctor("D1", "Anna", "Bianchi", "Cardiology")
    manager.add_doctor("D3", "Luca", "Verdi", "Dermatology")
    manager.add_daily_schedule("D1", DATE, "09:00", "10:00", 30)
    manager.add_daily_schedule("D2", DATE, "14:00", "15:00", 20)
    manager.add_daily_schedule("D3", "2024-01-11", "08:00", "09:00", 60)
    return manager
