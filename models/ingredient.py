"""
Ingredient Model

One row per distinct canonical ingredient name.
"""

import uuid

from flask import current_app, has_app_context

from .base import db


def new_id():
    return str(uuid.uuid4())


class Ingredient(db.Model):
    """
    Ingredient identity.

    canonical_name is the lowercase singular form and is unique.
    display_name keeps the spelling most recently supplied from the catalog.
    The image is not stored; it is looked up from the catalog by slug.
    """
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    canonical_name = db.Column(db.String(200), unique=True, nullable=False, index=True)
    display_name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=True)

    @property
    def image(self):
        if not self.slug or not has_app_context():
            return None
        catalog = current_app.extensions.get('catalog')
        return catalog.image_for(self.slug) if catalog else None

    def to_dict(self):
        return {
            'id': self.id,
            'canonical_name': self.canonical_name,
            'display_name': self.display_name,
            'slug': self.slug,
            'image': self.image,
        }
