"""
Database models for the Visit Rewards platform.
Users, venue activities, QR codes, visits, points ledger, rewards and feedback.
"""
from .user import User
from .activity import Activity
from .qr_code import QRCode
from .visit import Visit
from .points import PointsTransaction, TRANSACTION_TYPES
from .reward import Reward, RewardRedemption
from .review import Review

__all__ = [
    'User',
    'Activity',
    'QRCode',
    'Visit',
    'PointsTransaction',
    'TRANSACTION_TYPES',
    'Reward',
    'RewardRedemption',
    'Review',
]
