"""Mall directory API: shops, employees and the JSON document behind them."""
