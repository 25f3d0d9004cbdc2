"""
User Service

관리자 콘솔의 사용자 조회 / 관리자 권한 부여·회수
"""

import logging
from typing import Optional

from common.application.result import Err, Ok, Result
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import QuerySet

logger = logging.getLogger(__name__)

User = get_user_model()


class UserService:
    """
    사용자 서비스

    관리자(role=ADMIN)는 항상 최소 1명 이상 남아 있어야 합니다.
    """

    @staticmethod
    def get_user(user_id: int) -> Optional[User]:
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            logger.warning(f"User {user_id} not found")
            return None

    @staticmethod
    def list_users(role: Optional[str] = None) -> QuerySet:
        queryset = User.objects.all()
        if role in User.Role.values:
            queryset = queryset.filter(role=role)
        return queryset.order_by("-date_joined", "-id")

    @staticmethod
    def admin_count() -> int:
        return User.objects.filter(role=User.Role.ADMIN).count()

    @staticmethod
    def promote_to_admin(user_id: int) -> Result[User]:
        """
        일반 사용자를 관리자로 승격

        Returns:
            Ok(User) 또는 Err(NOT_FOUND / ALREADY_ADMIN)
        """
        with transaction.atomic():
            target = User.objects.select_for_update().filter(pk=user_id).first()
            if target is None:
                return Err(code="NOT_FOUND", message="目标用户不存在")
            if target.role == User.Role.ADMIN:
                return Err(code="ALREADY_ADMIN", message="用户已经是管理员")

            target.role = User.Role.ADMIN
            target.save(update_fields=["role"])
            logger.info(f"Promoted User {user_id} to ADMIN")
            return Ok(target)

    @staticmethod
    def demote_admin(actor_id: int, user_id: int) -> Result[User]:
        """
        관리자 권한 회수

        자기 자신, 일반 사용자, 마지막 남은 관리자는 회수할 수 없습니다.
        """
        if actor_id == user_id:
            return Err(code="CANNOT_DEMOTE_SELF", message="不能撤销自己的管理员权限")

        with transaction.atomic():
            target = User.objects.select_for_update().filter(pk=user_id).first()
            if target is None:
                return Err(code="NOT_FOUND", message="目标用户不存在")
            if target.role != User.Role.ADMIN:
                return Err(code="ALREADY_USER", message="用户已经是普通用户")
            if UserService.admin_count() <= 1:
                return Err(code="LAST_ADMIN", message="不能撤销最后一个管理员")

            target.role = User.Role.USER
            target.save(update_fields=["role"])
            logger.info(f"Demoted User {user_id} to USER by {actor_id}")
            return Ok(target)

    @staticmethod
    def init_first_admin(user_id: int) -> Result[User]:
        """
        시스템 최초 관리자 지정. 관리자가 한 명이라도 있으면 거부합니다.
        """
        with transaction.atomic():
            if UserService.admin_count() > 0:
                return Err(code="ADMIN_EXISTS", message="系统已存在管理员，不能重复初始化")

            target = User.objects.select_for_update().filter(pk=user_id).first()
            if target is None:
                return Err(code="NOT_FOUND", message="用户不存在")

            target.role = User.Role.ADMIN
            target.save(update_fields=["role"])
            logger.info(f"User {user_id} initialized as first ADMIN")
            return Ok(target)
