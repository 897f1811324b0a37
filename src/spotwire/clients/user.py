"""User profile endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import PrivateUser, PublicUser

from .base import ResourceClient


@dataclass(frozen=True, slots=True)
class GetUserRequest:
    id: str


class UserClient(ResourceClient):
    async def get_current_user(self) -> PrivateUser:
        return await self.dispatcher.fetch(RequestDescriptor.get("me"), PrivateUser)

    async def get_user(self, request: GetUserRequest) -> PublicUser:
        return await self.dispatcher.fetch(RequestDescriptor.get(f"users/{request.id}"), PublicUser)
