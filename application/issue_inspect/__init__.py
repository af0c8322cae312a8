from application.issue_inspect.labels import KIND_LABELS, label_for, parse_kind

__all__ = ["KIND_LABELS", "label_for", "parse_kind"]
