"""予算管理バックエンド."""
