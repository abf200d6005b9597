from sqlalchemy.orm import Session
from typing import List, Optional, Type, TypeVar

from sportcenter.database import Base, commit
from sportcenter.models.site_content import ContactInfo, SocialMediaLink

ContentModel = TypeVar("ContentModel", SocialMediaLink, ContactInfo)


def _order_columns(model: Type[Base]):
    secondary = model.platform if model is SocialMediaLink else model.type
    return model.display_order, secondary, model.id


def get_items(
    db: Session, model: Type[ContentModel], active_only: bool = False
) -> List[ContentModel]:
    query = db.query(model)
    if active_only:
        query = query.filter(model.is_active == True)  # noqa: E712
    return query.order_by(*_order_columns(model)).all()


def get_item(
    db: Session, model: Type[ContentModel], item_id: int
) -> Optional[ContentModel]:
    return db.query(model).filter(model.id == item_id).first()


def create_item(db: Session, model: Type[ContentModel], data: dict) -> ContentModel:
    db_item = model(**data, is_active=True)
    db.add(db_item)
    commit(db)
    db.refresh(db_item)
    return db_item


def update_item(
    db: Session, model: Type[ContentModel], item_id: int, data: dict
) -> Optional[ContentModel]:
    db_item = get_item(db, model, item_id)
    if not db_item:
        return None

    for field, value in data.items():
        setattr(db_item, field, value)

    commit(db)
    db.refresh(db_item)
    return db_item


def delete_item(db: Session, model: Type[ContentModel], item_id: int) -> bool:
    db_item = get_item(db, model, item_id)
    if not db_item:
        return False

    db.delete(db_item)
    commit(db)
    return True
