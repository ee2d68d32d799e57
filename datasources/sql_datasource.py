"""
Fuente de datos SQL base con operaciones CRUD comunes.

Proporciona las operaciones de base de datos estándar que reutilizan
las fuentes de datos respaldadas por SQLAlchemy.
"""

from typing import TypeVar, Generic, List, Optional, Type
from sqlalchemy.orm import Session
from sqlalchemy import asc
from sqlalchemy.exc import SQLAlchemyError
import logging

from core.exceptions import NotFoundException, DatabaseException

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseSqlDatasource(Generic[T]):
    """
    Fuente de datos genérica sobre una sesión SQLAlchemy.

    Esta clase debe ser heredada por las fuentes de datos SQL concretas.
    """

    resource_name: str = "Registro"

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa la fuente de datos.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM que gestiona
        """
        self.db = db
        self.model_class = model_class

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Obtiene una entidad por su ID.

        Args:
            id: ID de la entidad

        Returns:
            La entidad o None si no existe
        """
        try:
            return self.db.get(self.model_class, str(id))
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise DatabaseException(f"Error al obtener {self.resource_name}")

    def get_by_id_or_fail(self, id: str) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: Si la entidad no existe
        """
        entity = self.get_by_id(id)
        if entity is None:
            raise NotFoundException(
                resource=self.resource_name,
                identifier=str(id)
            )
        return entity

    def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        order_by: Optional[str] = None
    ) -> List[T]:
        """
        Devuelve una página de entidades, ordenada ascendente por `order_by`
        cuando el modelo tiene ese atributo.
        """
        try:
            query = self.db.query(self.model_class)

            if order_by and hasattr(self.model_class, order_by):
                query = query.order_by(asc(getattr(self.model_class, order_by)))

            return query.offset(skip).limit(limit).all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting all {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al listar {self.resource_name}")

    def count_all(self) -> int:
        """Cuenta todas las entidades de la tabla."""
        try:
            return self.db.query(self.model_class).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al contar {self.resource_name}")

    def add(self, entity: T) -> T:
        """
        Agrega una nueva entidad a la sesión y la sincroniza con la base de datos.

        Args:
            entity: La entidad a crear

        Returns:
            La entidad creada, con sus valores por defecto cargados
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al crear {self.resource_name}")

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Error al guardar cambios en la base de datos")
