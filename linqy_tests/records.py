"""
seeded fake records for tests that want realistic rows instead of integers.
"""

from typing import Any, Dict, List, Optional
from faker import Faker
from linqy import from_iterable, Enumerable

DEPARTMENTS = ['eng', 'sales', 'hr', 'marketing']


def _faker(seed: Optional[int]) -> Faker:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def people(count: int, seed: Optional[int] = 42) -> List[Dict[str, Any]]:
    """person rows with unique ids, a department and an age"""
    fake = _faker(seed)
    return [{
        'id': i + 1,
        'name': fake.first_name(),
        'age': fake.pyint(min_value=18, max_value=65),
        'salary': fake.pyint(min_value=30000, max_value=150000),
        'department': fake.random_element(DEPARTMENTS),
        'active': fake.pybool(),
    } for i in range(count)]


def orders(count: int, customer_count: int, seed: Optional[int] = 7) -> List[Dict[str, Any]]:
    """order rows whose customer_id points into people(customer_count)"""
    fake = _faker(seed)
    return [{
        'order_id': 1000 + i,
        'customer_id': fake.pyint(min_value=1, max_value=customer_count),
        'total': fake.pyfloat(min_value=5, max_value=500, right_digits=2),
    } for i in range(count)]


def people_seq(count: int, seed: Optional[int] = 42) -> Enumerable:
    return from_iterable(people(count, seed))
