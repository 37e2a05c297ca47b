"""Orders service: purchase order lifecycle backed by the product catalog."""
