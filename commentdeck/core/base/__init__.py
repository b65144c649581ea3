from commentdeck.core.base.commentdeck_base import CommentDeck, CommentDeckMeta

__all__ = ["CommentDeck", "CommentDeckMeta"]
