"""
Root GraphQL mutation definitions
"""

import strawberry

from ...plugin import MUTATION
from ..inputs import CreateUserInput, TagInput
from ..operations import resolve
from ..types.user import UserResponse


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(description="Echo a message back from the plugin")
    def say_hello_mutation(self, info: strawberry.Info, message: str | None = None) -> str:
        return resolve(info, MUTATION, "sayHelloMutation", message=message)

    @strawberry.mutation(description="Create a new user")
    def create_user(
        self, info: strawberry.Info, input: CreateUserInput | None = None
    ) -> UserResponse:
        return UserResponse.from_envelope(resolve(info, MUTATION, "createUser", input=input))

    @strawberry.mutation(description="Process multiple tag objects")
    def process_bulk_tags(
        self,
        info: strawberry.Info,
        user_id: str | None = None,
        tags: list[TagInput] | None = None,
    ) -> str:
        return resolve(info, MUTATION, "processBulkTags", userId=user_id, tags=tags)
