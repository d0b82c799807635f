"""
Reward catalog and redemption.

Redemption follows the same pattern as visit acceptance: the ledger debit,
the redemption row and the stock counter are committed together, and any
failure rolls all of them back before the error is re-raised.
"""
import logging
from typing import List, Optional

from flask import current_app

from ..extensions import db
from ..models import Reward, RewardRedemption
from ..utils.cache import invalidate_stats
from ..utils.exceptions import ValidationError, NotFoundError
from .points_service import PointsService, points_service

logger = logging.getLogger(__name__)


class RewardService:

    def __init__(self, ledger: Optional[PointsService] = None):
        self.ledger = ledger or points_service

    def list_rewards(self, include_inactive: bool = False) -> List[Reward]:
        query = Reward.query
        if not include_inactive:
            query = query.filter_by(is_active=True)
        return query.order_by(Reward.points_cost, Reward.name).all()

    def create_reward(
        self,
        name: str,
        points_cost: int,
        description: str = None,
        available_quantity: int = None
    ) -> Reward:
        name = (name or '').strip()
        if not name:
            raise ValidationError('Reward name is required', 'name')
        if isinstance(points_cost, bool) or not isinstance(points_cost, int) or points_cost <= 0:
            raise ValidationError('points_cost must be a positive integer', 'points_cost')
        if available_quantity is not None and (
            not isinstance(available_quantity, int) or available_quantity < 0
        ):
            raise ValidationError('available_quantity must be a non-negative integer', 'available_quantity')

        reward = Reward(
            name=name,
            points_cost=points_cost,
            description=description,
            available_quantity=available_quantity,
            is_active=True
        )
        db.session.add(reward)
        db.session.commit()
        return reward

    def set_active(self, reward_id: int, is_active: bool) -> Reward:
        reward = db.session.get(Reward, reward_id)
        if not reward:
            raise NotFoundError('Reward', reward_id)
        if not isinstance(is_active, bool):
            raise ValidationError('is_active must be true or false', 'is_active')
        reward.is_active = is_active
        db.session.commit()
        return reward

    def redeem_reward(self, user_id: int, reward_id: int) -> RewardRedemption:
        """
        Spend points on a reward.

        Raises:
            NotFoundError: reward does not exist or is inactive
            ValidationError: reward is out of stock
            InsufficientPointsError / UserNotFoundError: from the ledger
        """
        try:
            reward = db.session.get(Reward, reward_id)
            if not reward or not reward.is_active:
                raise NotFoundError('Reward', reward_id)

            remaining = reward.remaining_quantity()
            if remaining is not None and remaining <= 0:
                raise ValidationError('This reward is out of stock', 'reward')

            transaction = self.ledger.process_points_transaction(
                user_id,
                -reward.points_cost,
                'redeem',
                'Redeemed ' + reward.name,
                {'reward_id': reward.id, 'reward_name': reward.name}
            )

            redemption = RewardRedemption(
                user_id=user_id,
                reward_id=reward.id,
                transaction_id=transaction.id,
                points_spent=reward.points_cost,
                status='completed'
            )
            db.session.add(redemption)
            reward.redeemed_quantity = (reward.redeemed_quantity or 0) + 1

            db.session.commit()

        except Exception as e:
            db.session.rollback()
            logger.error('Error in redeem_reward: %s', e)
            raise

        invalidate_stats()
        current_app.logger.info(
            f"Reward redeemed: user {user_id} -> {reward.name} (-{reward.points_cost} pts)"
        )
        return redemption

    def list_redemptions(self, user_id: int) -> List[RewardRedemption]:
        return RewardRedemption.query.filter_by(user_id=user_id).order_by(
            RewardRedemption.created_at.desc(), RewardRedemption.id.desc()
        ).all()


reward_service = RewardService()
