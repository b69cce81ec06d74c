from .dynamodb_member_repository import (
    DynamoDBMemberRepository as DynamoDBMemberRepository,
)
