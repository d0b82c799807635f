"""
Points Service - the loyalty ledger.

All balance changes go through process_points_transaction, which writes a
PointsTransaction row and keeps the user's cached balance in step.

TRANSACTIONS:
- process_points_transaction never commits. It joins whatever transaction
  the caller has open on db.session and only flushes, so the caller decides
  whether the ledger entry lives or dies with the rest of its work.
- Read helpers (balance, history) are plain queries.
"""

from typing import Optional, Dict, Any

from flask import current_app
from sqlalchemy import func

from ..extensions import db
from ..models import User, PointsTransaction, TRANSACTION_TYPES
from ..utils.exceptions import (
    ValidationError,
    UserNotFoundError,
    InsufficientPointsError,
)

# Kinds that must add points / must remove points
POSITIVE_KINDS = {'earn'}
NEGATIVE_KINDS = {'redeem', 'expire'}


class PointsService:
    """
    Central service for points ledger operations.

    Usage:
        service = PointsService()
        service.process_points_transaction(user_id, 10, 'earn', 'Points earned from gym', {...})
        db.session.commit()
    """

    def process_points_transaction(
        self,
        user_id: int,
        amount: int,
        kind: str,
        note: str = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> PointsTransaction:
        """
        Record a signed points change for a user inside the caller's transaction.

        Args:
            user_id: User whose balance changes
            amount: Signed points delta (positive earns, negative spends)
            kind: Transaction kind (earn, redeem, adjustment, expire)
            note: Human-readable description
            metadata: JSON payload linking the entry to its source

        Returns:
            The flushed PointsTransaction (id assigned, not committed)

        Raises:
            ValidationError: Unknown kind, zero amount or wrong sign for kind
            UserNotFoundError: No such user
            InsufficientPointsError: Spend would take the balance below zero
        """
        if kind not in TRANSACTION_TYPES:
            raise ValidationError(f'Unknown transaction kind: {kind}', 'kind')

        if isinstance(amount, bool) or not isinstance(amount, int) or amount == 0:
            raise ValidationError('Points amount must be a non-zero integer', 'amount')

        if kind in POSITIVE_KINDS and amount < 0:
            raise ValidationError(f"'{kind}' transactions must be positive", 'amount')
        if kind in NEGATIVE_KINDS and amount > 0:
            raise ValidationError(f"'{kind}' transactions must be negative", 'amount')

        user = db.session.get(User, user_id)
        if not user:
            raise UserNotFoundError(user_id)

        current_balance = user.points_balance or 0
        if amount < 0 and current_balance + amount < 0:
            raise InsufficientPointsError(current_balance, -amount)

        new_balance = current_balance + amount

        transaction = PointsTransaction(
            user_id=user_id,
            points=amount,
            transaction_type=kind,
            description=note or f'{TRANSACTION_TYPES[kind]}: {amount} pts',
            balance_after=new_balance,
            details=dict(metadata or {}),
        )
        db.session.add(transaction)

        user.points_balance = new_balance
        if amount > 0:
            user.lifetime_points_earned = (user.lifetime_points_earned or 0) + amount
        else:
            user.lifetime_points_spent = (user.lifetime_points_spent or 0) - amount

        db.session.flush()

        current_app.logger.info(
            f"Points {kind}: user {user_id} {amount:+d} pts. New balance: {new_balance}"
        )

        return transaction

    def get_balance(self, user_id: int) -> int:
        """Points balance calculated from the ledger."""
        if not db.session.get(User, user_id):
            raise UserNotFoundError(user_id)

        balance = db.session.query(
            func.coalesce(func.sum(PointsTransaction.points), 0)
        ).filter(
            PointsTransaction.user_id == user_id
        ).scalar()

        return int(balance)

    def get_history(
        self,
        user_id: int,
        page: int = 1,
        per_page: int = 20,
        transaction_type: str = None
    ) -> Dict[str, Any]:
        """
        Paginated ledger history for a user, newest first.
        """
        if not db.session.get(User, user_id):
            raise UserNotFoundError(user_id)

        per_page = max(1, min(per_page, 100))

        query = PointsTransaction.query.filter(PointsTransaction.user_id == user_id)
        if transaction_type:
            query = query.filter(PointsTransaction.transaction_type == transaction_type)

        query = query.order_by(PointsTransaction.created_at.desc(), PointsTransaction.id.desc())
        pagination = query.paginate(page=page, per_page=per_page, error_out=False)

        return {
            'transactions': [t.to_dict() for t in pagination.items],
            'pagination': {
                'page': page,
                'per_page': per_page,
                'total': pagination.total,
                'pages': pagination.pages,
                'has_next': pagination.has_next,
                'has_prev': pagination.has_prev
            }
        }


points_service = PointsService()
