"""Two weighted user profiles sharing one arrival schedule.

Run with:

    tsungforge run examples/weighted_sessions.py
"""

from __future__ import annotations

from tsungforge import ExtractionKind, ScenarioDocument, TimeUnit, load_config

doc = ScenarioDocument(load_config().global_options())
doc.add_client("loadgen-1", False, 5000)
doc.add_client("loadgen-2", False, 5000)
doc.add_server("shop.internal", 8080)

doc.add_phase(2, TimeUnit.MINUTE, 10, TimeUnit.SECOND)
doc.add_phase(10, TimeUnit.MINUTE, 50, TimeUnit.SECOND)

browser = doc.add_session("browser", probability=70)
catalog = browser.add_transaction("catalog")
listing = catalog.add_request("GET", "/products?page=1")
listing.add_dynamic_variable("product_id", ExtractionKind.JSON, "$.items[0].id")
catalog.add_request("GET", "/products/%%_product_id%%")
browser.add_think_time(3)

buyer = doc.add_session("buyer", probability=30)
cart = buyer.add_transaction("cart")
cart.add_request("POST", "/cart", {"sku": "ABC-123", "qty": "1"})
buyer.add_think_time(1, randomize=False)
checkout = buyer.add_transaction("checkout")
order = checkout.add_request("POST", "/orders", {"note": "leave at door"})
order.add_dynamic_variable("order_id", ExtractionKind.REGEXP, 'id="([0-9]+)"')
