import logging
from datetime import datetime
from typing import Optional, get_args, Union, Callable

import sqlalchemy as db
from pydantic import BaseModel, create_model, ConfigDict
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.exceptions import ErrorCode, PersistenceError

logger = logging.getLogger(__name__)

FILTERS = dict[str, Union[str, int, float, list, dict]]


class BaseSchema(DeclarativeBase):
    __abstract__ = True

    # rows of an immutable schema reject any UPDATE once inserted
    __immutable__: bool = False
    __model__: type[BaseModel] = None

    SQLA_TYPE_MAPPING = {
        db.Integer: int,
        db.String: str,
        db.Text: str,
        db.Float: float,
        db.Boolean: bool,
        db.DateTime: datetime,
    }

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    @classmethod
    def get_field_type(cls, col):
        return cls.SQLA_TYPE_MAPPING.get(type(col.type), str)

    @classmethod
    def _parse_fields(cls, *, is_optional: Callable[[db.Column], bool] = None):
        fields = {}
        for col in cls.__table__.columns:  # noqa
            optional = is_optional(col) if is_optional else col.nullable
            field_type = cls.get_field_type(col)
            fields[col.name] = (
                Optional[field_type] if optional
                else field_type, None if optional else ...
            )
        return fields

    @classmethod
    def _generate_pydantic_model(cls, model_name: str = None):
        if cls.__model__: return
        model_name = model_name or cls.__name__.replace("Schema", "Model")
        fields = cls._parse_fields(is_optional=lambda col: col.nullable or col.primary_key)
        cls.__model__ = create_model(model_name, __config__=ConfigDict(from_attributes=True), **fields)

    @classmethod
    def __declare_last__(cls):
        cls._generate_pydantic_model()
        if cls.__immutable__:
            event.listen(cls, "before_update", cls._immutable_update_listener)

    @staticmethod
    def _immutable_update_listener(_, __, target):
        raise ValueError(f"{target.__tablename__} rows are immutable and cannot be modified.")

    def model_dump(self, *exclude) -> dict:
        return {
            col.key: getattr(self, col.key)
            for col in self.__table__.columns  # noqa
            if col.key not in exclude
        }


class GenericManager[SchemaType: BaseSchema]:
    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    async def init_db(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseSchema.metadata.create_all)

    @property
    def Schema(self) -> type[SchemaType]:
        return get_args(self.__orig_bases__[0])[0]  # noqa

    @property
    def tablename(self) -> str:
        return self.Schema.__tablename__

    @classmethod
    def _filter(cls, query: db.Select, filters: FILTERS, schema: type[BaseSchema]) -> db.Select:
        operator_mapping = {
            '==': lambda col, val: col == val,
            '!=': lambda col, val: col != val,
            '>': lambda col, val: col > val,
            '>=': lambda col, val: col >= val,
            '<': lambda col, val: col < val,
            '<=': lambda col, val: col <= val,
            'in': lambda col, val: col.in_(val if isinstance(val, list) else [val]),
        }
        for column, condition in filters.items():
            col = getattr(schema, column)
            if isinstance(condition, dict):
                for op, value in condition.items():
                    if op in operator_mapping:
                        query = query.filter(operator_mapping[op](col, value))
            elif isinstance(condition, list):
                query = query.filter(col.in_(condition))
            else:
                query = query.filter(col == condition)
        return query

    def _sort(self, query: db.Select, sorts: list[str]) -> db.Select:
        for sort in sorts:
            ascending = not sort.startswith("-")
            col = getattr(self.Schema, sort.lstrip("-").lstrip("+"))
            query = query.order_by(col.asc() if ascending else col.desc())
        return query

    async def create(self, data: SchemaType | BaseModel | dict, *, session: AsyncSession = None) -> SchemaType:
        if session:
            if isinstance(data, BaseModel): data = data.model_dump()
            record = self.Schema(**data) if isinstance(data, dict) else data
            session.add(record)
            await session.flush()
            await session.refresh(record)
            return record
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    record = await self.create(data, session=session)
                return record
        except SQLAlchemyError as e:
            logger.error(f"Insert into {self.tablename} failed: {e}", exc_info=True)
            raise PersistenceError(ErrorCode.DB_WRITE_FAILED, self.tablename) from e

    async def fetch(self, id: int, *, session: AsyncSession = None) -> Optional[SchemaType]:
        if session:
            return await session.get(self.Schema, id)
        try:
            async with self.session_factory() as session:
                return await self.fetch(id, session=session)
        except SQLAlchemyError as e:
            logger.error(f"Fetch from {self.tablename} failed: {e}", exc_info=True)
            raise PersistenceError(ErrorCode.DB_READ_FAILED, self.tablename) from e

    async def fetch_all(
            self,
            limit: int = 0,
            offset: int = 0,
            filters: FILTERS = None,
            sorts: list[str] = None,
            *,
            session: AsyncSession = None,
    ) -> list[SchemaType]:
        if session:
            query = db.select(self.Schema)
            if filters: query = self._filter(query, filters, self.Schema)
            if sorts: query = self._sort(query, sorts)
            if limit: query = query.limit(limit)
            if offset: query = query.offset(offset)
            records = await session.execute(query)
            return list(records.scalars())
        try:
            async with self.session_factory() as session:
                return await self.fetch_all(limit, offset, filters, sorts, session=session)
        except SQLAlchemyError as e:
            logger.error(f"Query on {self.tablename} failed: {e}", exc_info=True)
            raise PersistenceError(ErrorCode.DB_READ_FAILED, self.tablename) from e


__all__ = [
    "BaseSchema", "GenericManager",
]
