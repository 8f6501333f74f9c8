"""Stock position calculator: lots, pricing engine, UI and exporters."""
