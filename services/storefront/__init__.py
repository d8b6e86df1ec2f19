"""Terminal storefront that renders the catalog service's products."""
