"""
Recipe Models

Contains the Recipe, RecipeStep and RecipeIngredient models. A recipe's
steps and ingredients are always replaced as a whole on update.
"""

from datetime import datetime, timezone

from .base import db
from .ingredient import new_id


def utcnow():
    return datetime.now(timezone.utc)


class Recipe(db.Model):
    """Recipe with ordered steps and ingredient quantities."""
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(200), nullable=False, index=True)
    instructions = db.Column(db.Text, nullable=True)  # Legacy free text, see steps
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    steps = db.relationship('RecipeStep', backref='recipe', lazy=True,
                            cascade='all, delete-orphan', order_by='RecipeStep.step_number')
    ingredients = db.relationship('RecipeIngredient', backref='recipe', lazy=True,
                                  cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'instructions': self.instructions,
            'steps': [step.to_dict() for step in self.steps],
            'ingredients': [ri.to_dict() for ri in self.ingredients],
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


class RecipeStep(db.Model):
    """Numbered instruction step (1-based, no gaps)."""
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    recipe_id = db.Column(db.String(36), db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    step_number = db.Column(db.Integer, nullable=False)
    content = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {'id': self.id, 'step_number': self.step_number, 'content': self.content}


class RecipeIngredient(db.Model):
    """Join table linking recipes to ingredients with quantity, unit and note."""
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    recipe_id = db.Column(db.String(36), db.ForeignKey('recipe.id', ondelete='CASCADE'), nullable=False, index=True)
    ingredient_id = db.Column(db.String(36), db.ForeignKey('ingredient.id'), nullable=False, index=True)
    quantity = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(20), nullable=False)
    note = db.Column(db.String(200), nullable=True)  # e.g. "Red" vs "White" onion
    ingredient = db.relationship('Ingredient')

    def to_dict(self):
        return {
            'id': self.id,
            'ingredient': self.ingredient.to_dict(),
            'quantity': self.quantity,
            'unit': self.unit,
            'note': self.note,
        }
