# Importer モジュール
# Scribe 記録 HTML をテストケース（ステップ列）に変換

from .classifier import ActionClassifier, ActionRule, ClassifiedAction
from .document import DocumentParser
from .extractor import StepBlock, StepExtractor
from .selectors import SelectorBuilder

__all__ = [
    "ActionClassifier",
    "ActionRule",
    "ClassifiedAction",
    "DocumentParser",
    "SelectorBuilder",
    "StepBlock",
    "StepExtractor",
]
