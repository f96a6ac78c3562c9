#!/usr/bin/env python3
"""
run_demo.py - End-to-end demo against a running shop API
- Checks /health
- Places enough orders to reach the first discount milestone
- Asks the admin endpoint for a code (and asks again to show it is idempotent)
- Checks out with the code, then tries to reuse it
- Prints the admin stats
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

import requests


class DemoRunner:
    def __init__(self, base_url: Optional[str] = None, session=None, nth_order: Optional[int] = None):
        self.base_url = base_url if base_url is not None else os.getenv("SHOP_BASE", "http://localhost:3000")
        self.session = session or requests.Session()
        self.nth_order = nth_order or int(os.getenv("NTH_ORDER", "5"))
        self.basket = [("p1", 2), ("p3", 1)]

    # ---------- helpers ----------
    def show_step(self, title: str):
        print(f"\n=== {title} ===")

    def call_api(
        self,
        method: str,
        path: str,
        data: Optional[Any] = None,
        expected_status: List[int] = [200, 201],
        quiet: bool = False,
        timeout: int = 10,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        if not quiet:
            print(f"\n-> {method} {url}")
            if data is not None:
                print(f"   Body: {json.dumps(data)}")
        try:
            resp = self.session.request(method, url, json=data, timeout=timeout)
        except requests.exceptions.RequestException as e:
            print(f"   Error: \033[91m{e}\033[0m")
            return {"status": None, "data": None, "error": str(e)}

        try:
            js = resp.json()
        except ValueError:
            js = None
        if not quiet:
            color = "\033[92m" if resp.status_code in expected_status else "\033[93m"
            print(f"   Status: {color}{resp.status_code}\033[0m")
            if js is not None:
                print(json.dumps(js, indent=2))
        return {"status": resp.status_code, "data": js}

    def fill_cart(self, user_id: str):
        for product_id, qty in self.basket:
            self.call_api("POST", "/cart/add", {"userId": user_id, "productId": product_id, "quantity": qty}, quiet=True)

    # ---------- flow ----------
    def run_demo(self) -> Dict[str, Any]:
        print("Starting shop API demo")
        print("=" * 50)

        self.show_step("Preflight: health")
        health = self.call_api("GET", "/health", expected_status=[200])
        if health.get("status") != 200:
            print("\033[91mAPI not reachable; is the server running?\033[0m")
            return {}

        self.show_step(f"Place {self.nth_order} orders to reach the first milestone")
        for i in range(self.nth_order):
            user = f"demo-{i}"
            self.fill_cart(user)
            res = self.call_api("POST", "/checkout", {"userId": user}, quiet=True)
            total = (res.get("data") or {}).get("order", {}).get("total")
            print(f"  - {user.ljust(10)} -> {res.get('status')} total={total}")

        self.show_step("Admin: generate discount")
        gen = self.call_api("POST", "/admin/generate-discount", expected_status=[201])
        code = ((gen.get("data") or {}).get("discount") or {}).get("code")

        self.show_step("Admin: generate again (no new code expected)")
        self.call_api("POST", "/admin/generate-discount", expected_status=[200])

        if code:
            self.show_step(f"Customer: checkout with {code}")
            self.fill_cart("lucky")
            self.call_api("POST", "/checkout", {"userId": "lucky", "discountCode": code})

            self.show_step("Customer: reuse the same code (expect 400)")
            self.fill_cart("unlucky")
            self.call_api("POST", "/checkout", {"userId": "unlucky", "discountCode": code}, expected_status=[400])
        else:
            print("Skipping discounted checkout - no code generated")

        self.show_step("Admin: stats")
        stats = self.call_api("GET", "/admin/stats", expected_status=[200])

        print("\n\033[92m=== DEMO COMPLETE ===\033[0m")
        return stats.get("data") or {}


if __name__ == "__main__":
    base = sys.argv[1] if len(sys.argv) > 1 else None
    DemoRunner(base_url=base).run_demo()
