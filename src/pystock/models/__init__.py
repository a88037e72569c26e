from .stock_models import Stock
