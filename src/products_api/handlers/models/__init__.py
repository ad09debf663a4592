from products_api.handlers.models.env_vars import ProductsEnvVars, get_handler_env_vars

__all__ = [
    "ProductsEnvVars",
    "get_handler_env_vars",
]
