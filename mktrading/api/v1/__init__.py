# API v1 Package
from mktrading.api.v1 import auth, parties, challans, hr, expenses, payments, reports

__all__ = [
    'auth',
    'parties',
    'challans',
    'hr',
    'expenses',
    'payments',
    'reports',
]
