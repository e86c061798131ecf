"""DynamoDB service wrapper for table operations.

The service is an explicitly constructed handle: the application creates one
at startup, passes it to every store, and closes it on shutdown.

    with DynamoDBService.from_settings(settings) as db:
        rooms = RoomStore(db)

Conditional-check failures are reported as a definite False/None result.
Any other storage failure is logged with context and raised as
StoreUnavailableError; no call is retried.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from dreamstay.models.errors import StoreUnavailableError
from dreamstay.utils.logging import get_logger

if TYPE_CHECKING:
    from dreamstay.config import Settings

logger = get_logger(__name__)

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"
TRANSACTION_CANCELED = "TransactionCanceledException"
CONDITION_FAILED_REASON = "ConditionalCheckFailed"


class DynamoDBService:
    """Service for DynamoDB operations with prefixed table names."""

    def __init__(
        self,
        table_prefix: str,
        region: str = "eu-west-1",
        endpoint_url: str | None = None,
        timeout_seconds: float = 5.0,
    ) -> None:
        """Initialize DynamoDB service. Call connect() before use.

        Args:
            table_prefix: Prefix prepended to every table name
            region: AWS region of the tables
            endpoint_url: Optional endpoint override (DynamoDB Local)
            timeout_seconds: Connect and read timeout for every call
        """
        self.name_prefix = table_prefix
        self.region = region
        self.endpoint_url = endpoint_url
        self.timeout_seconds = timeout_seconds
        self._dynamodb: Any = None
        self._client: Any = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "DynamoDBService":
        """Create an unconnected service from application settings."""
        return cls(
            table_prefix=settings.table_prefix,
            region=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
            timeout_seconds=settings.store_timeout_seconds,
        )

    # Lifecycle

    @property
    def connected(self) -> bool:
        return self._dynamodb is not None

    def connect(self) -> "DynamoDBService":
        """Create the boto3 resource and client.

        Retries are disabled so failures surface to the caller immediately.
        """
        if self.connected:
            return self

        config = Config(
            connect_timeout=self.timeout_seconds,
            read_timeout=self.timeout_seconds,
            retries={"total_max_attempts": 1, "mode": "standard"},
        )
        kwargs: dict[str, Any] = {"region_name": self.region, "config": config}
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url

        self._dynamodb = boto3.resource("dynamodb", **kwargs)
        self._client = boto3.client("dynamodb", **kwargs)
        logger.info("Connected to DynamoDB (prefix=%s, region=%s)", self.name_prefix, self.region)
        return self

    def close(self) -> None:
        """Release the underlying HTTP connection pools."""
        if not self.connected:
            return
        self._dynamodb.meta.client.close()
        self._client.close()
        self._dynamodb = None
        self._client = None
        logger.info("Closed DynamoDB connections")

    def __enter__(self) -> "DynamoDBService":
        return self.connect()

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def client(self) -> Any:
        """Low-level boto3 client, used for table provisioning."""
        if not self.connected:
            raise RuntimeError("DynamoDBService is not connected")
        return self._client

    def table_name(self, table: str) -> str:
        """Get full table name with prefix."""
        return f"{self.name_prefix}-{table}"

    def _get_table(self, table: str) -> Any:
        if not self.connected:
            raise RuntimeError("DynamoDBService is not connected")
        return self._dynamodb.Table(self.table_name(table))

    @contextmanager
    def _store_errors(self, operation: str, table: str) -> Iterator[None]:
        """Translate unexpected storage failures into StoreUnavailableError."""
        try:
            yield
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            logger.error(
                "DynamoDB %s on %s failed: %s",
                operation,
                self.table_name(table),
                code,
            )
            raise StoreUnavailableError(operation) from e
        except BotoCoreError as e:
            logger.error(
                "DynamoDB %s on %s failed: %s",
                operation,
                self.table_name(table),
                type(e).__name__,
            )
            raise StoreUnavailableError(operation) from e

    # Generic CRUD operations

    def get_item(
        self,
        table: str,
        key: dict[str, Any],
        consistent_read: bool = True,
    ) -> dict[str, Any] | None:
        """Get a single item by key.

        Args:
            table: Table name without prefix
            key: Primary key dict
            consistent_read: Use strongly consistent reads

        Returns:
            Item dict or None if not found
        """
        with self._store_errors("get_item", table):
            response = self._get_table(table).get_item(
                Key=key, ConsistentRead=consistent_read
            )
        item: dict[str, Any] | None = response.get("Item")
        return item

    def put_item(
        self,
        table: str,
        item: dict[str, Any],
        condition_expression: str | None = None,
    ) -> bool:
        """Put an item into the table.

        Args:
            table: Table name without prefix
            item: Item to store
            condition_expression: Optional condition for write

        Returns:
            True if successful, False if condition failed
        """
        with self._store_errors("put_item", table):
            try:
                kwargs: dict[str, Any] = {"Item": item}
                if condition_expression:
                    kwargs["ConditionExpression"] = condition_expression

                self._get_table(table).put_item(**kwargs)
                return True
            except ClientError as e:
                if e.response["Error"]["Code"] == CONDITIONAL_CHECK_FAILED:
                    return False
                raise

    def update_item(
        self,
        table: str,
        key: dict[str, Any],
        update_expression: str,
        expression_attribute_values: dict[str, Any],
        expression_attribute_names: dict[str, str] | None = None,
        condition_expression: str | None = None,
        return_values: str = "ALL_NEW",
    ) -> dict[str, Any] | None:
        """Update an item with expressions.

        Args:
            table: Table name without prefix
            key: Primary key dict
            update_expression: DynamoDB update expression
            expression_attribute_values: Values for expression
            expression_attribute_names: Names for expression (for reserved words)
            condition_expression: Optional condition for update
            return_values: Which attributes to return (ALL_NEW, ALL_OLD, ...)

        Returns:
            Returned attributes (empty dict if none) or None if condition failed
        """
        with self._store_errors("update_item", table):
            try:
                kwargs: dict[str, Any] = {
                    "Key": key,
                    "UpdateExpression": update_expression,
                    "ExpressionAttributeValues": expression_attribute_values,
                    "ReturnValues": return_values,
                }
                if expression_attribute_names:
                    kwargs["ExpressionAttributeNames"] = expression_attribute_names
                if condition_expression:
                    kwargs["ConditionExpression"] = condition_expression

                response = self._get_table(table).update_item(**kwargs)
                attrs: dict[str, Any] = response.get("Attributes") or {}
                return attrs
            except ClientError as e:
                if e.response["Error"]["Code"] == CONDITIONAL_CHECK_FAILED:
                    return None
                raise

    def delete_item(
        self,
        table: str,
        key: dict[str, Any],
        condition_expression: str | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
    ) -> bool:
        """Delete an item by key.

        Args:
            table: Table name without prefix
            key: Primary key dict
            condition_expression: Optional condition for delete
            expression_attribute_values: Values for the condition

        Returns:
            True if deleted (or didn't exist when unconditional),
            False if the condition failed
        """
        with self._store_errors("delete_item", table):
            try:
                kwargs: dict[str, Any] = {"Key": key}
                if condition_expression:
                    kwargs["ConditionExpression"] = condition_expression
                if expression_attribute_values:
                    kwargs["ExpressionAttributeValues"] = expression_attribute_values

                self._get_table(table).delete_item(**kwargs)
                return True
            except ClientError as e:
                if e.response["Error"]["Code"] == CONDITIONAL_CHECK_FAILED:
                    return False
                raise

    def query(
        self,
        table: str,
        key_condition: Any,
        index_name: str | None = None,
        filter_expression: Any | None = None,
        limit: int | None = None,
        scan_index_forward: bool = True,
    ) -> list[dict[str, Any]]:
        """Query table or GSI, following pagination.

        Args:
            table: Table name without prefix
            key_condition: Boto3 Key condition
            index_name: GSI name (optional)
            filter_expression: Additional filter (optional)
            limit: Max items to return
            scan_index_forward: Sort order (True=ascending)

        Returns:
            List of items
        """
        kwargs: dict[str, Any] = {
            "KeyConditionExpression": key_condition,
            "ScanIndexForward": scan_index_forward,
        }
        if index_name:
            kwargs["IndexName"] = index_name
        if filter_expression is not None:
            kwargs["FilterExpression"] = filter_expression
        if limit:
            kwargs["Limit"] = limit

        items: list[dict[str, Any]] = []
        with self._store_errors("query", table):
            table_resource = self._get_table(table)
            while True:
                response = table_resource.query(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key or (limit and len(items) >= limit):
                    break
                kwargs["ExclusiveStartKey"] = last_key
        return items[:limit] if limit else items

    def scan(
        self,
        table: str,
        filter_expression: Any | None = None,
    ) -> list[dict[str, Any]]:
        """Scan a whole table, following pagination.

        Args:
            table: Table name without prefix
            filter_expression: Optional boto3 Attr condition

        Returns:
            List of all matching items
        """
        kwargs: dict[str, Any] = {}
        if filter_expression is not None:
            kwargs["FilterExpression"] = filter_expression

        items: list[dict[str, Any]] = []
        with self._store_errors("scan", table):
            table_resource = self._get_table(table)
            while True:
                response = table_resource.scan(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        return items

    def transact_write(
        self,
        items: list[dict[str, Any]],
    ) -> bool:
        """Execute transactional write for multiple items.

        Items use the low-level attribute format ({"S": ...}); see
        boto3.dynamodb.types.TypeSerializer.

        Args:
            items: List of TransactWriteItem dicts

        Returns:
            True if successful, False if a condition cancelled the transaction

        Raises:
            StoreUnavailableError: on any other failure, including a
                cancellation for throttling or validation
        """
        with self._store_errors("transact_write", "transaction"):
            if not self.connected:
                raise RuntimeError("DynamoDBService is not connected")
            try:
                self._client.transact_write_items(TransactItems=items)
                return True
            except ClientError as e:
                if e.response["Error"]["Code"] != TRANSACTION_CANCELED:
                    raise
                reasons = [
                    reason.get("Code", "None")
                    for reason in e.response.get("CancellationReasons", [])
                ]
                if CONDITION_FAILED_REASON in reasons and all(
                    code in ("None", CONDITION_FAILED_REASON) for code in reasons
                ):
                    return False
                logger.error(
                    "DynamoDB transact_write cancelled: reasons=%s",
                    ",".join(reasons) or "unknown",
                )
                raise StoreUnavailableError("transact_write") from e
