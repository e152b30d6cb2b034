"""Demo records for the in-memory admin backend (wire format, camelCase)."""

from typing import Any, Dict, List

CITY_NAMES = {1: "New York", 2: "Los Angeles", 3: "Chicago", 4: "Houston", 5: "Miami"}
SERVICE_NAMES = {1: "Plumbing", 2: "Electrical", 3: "Carpentry", 4: "Painting", 5: "Lawn Care"}
STATUS_NAMES = {1: "Pending", 2: "In Progress", 3: "Completed", 4: "Cancelled"}

_WORKERS = [
    # id, name, city, service, rating, min, max, completed
    (1, "John Smith", "New York", "Plumbing", 4.8, 50, 150, 48),
    (2, "Emily Johnson", "Chicago", "Electrical", 4.9, 60, 180, 36),
    (3, "Michael Chen", "Los Angeles", "Carpentry", 4.7, 55, 165, 52),
    (4, "Sarah Wilson", "Houston", "Painting", 4.6, 45, 135, 29),
    (5, "David Rodriguez", "Houston", "Lawn Care", 4.5, 40, 120, 63),
    (6, "Jennifer Lee", "Miami", "Painting", 4.7, 35, 95, 42),
    (7, "Robert Garcia", "Miami", "Electrical", 4.8, 70, 200, 38),
    (8, "Lisa Wang", "Los Angeles", "Plumbing", 4.6, 55, 160, 27),
    (9, "Kevin Miller", "Miami", "Electrical", 4.9, 65, 190, 56),
    (10, "Amanda Taylor", "Chicago", "Carpentry", 4.7, 60, 170, 31),
]

_CUSTOMERS = [
    # id, name, city, requests
    (101, "Alice Brown", "Chicago", 4),
    (102, "Robert Lee", "New York", 2),
    (103, "Maria Garcia", "Miami", 7),
    (104, "James Taylor", "Houston", 1),
    (105, "Jennifer Kim", "Los Angeles", 3),
    (106, "Thomas Wilson", "Chicago", 5),
]

_REQUESTS = [
    # id, worker id, customer id, service, date, comment, status, prices, negotiation
    (1, 1, 101, "Plumbing", "2025-05-04T14:30:00", "Leaking faucet needs repair", "Completed", (75, 85, 80), "Agreed"),
    (2, 2, 102, "Electrical", "2025-05-05T10:15:00", "Need to install new light fixtures", "In Progress", (120, 150, 135), "Agreed"),
    (3, 3, 103, "Carpentry", "2025-05-05T16:45:00", "Custom bookshelf installation", "Pending", (200, 0, 0), "Pending"),
    (4, 4, 104, "Painting", "2025-05-06T09:00:00", "Paint living room and hallway", "Pending", (300, 350, 0), "Negotiating"),
    (5, 5, 105, "Lawn Care", "2025-05-03T11:30:00", "Weekly lawn maintenance needed", "Completed", (50, 60, 55), "Agreed"),
    (6, 6, 106, "Painting", "2025-05-02T13:00:00", "Repaint the garage door", "Completed", (120, 150, 135), "Agreed"),
    (7, 7, 103, "Electrical", "2025-05-07T15:30:00", "Breaker keeps tripping", "Pending", (80, 100, 0), "Negotiating"),
    (8, 8, 101, "Plumbing", "2025-05-04T09:45:00", "Clogged drain in bathroom", "Cancelled", (60, 0, 0), "Rejected"),
    (9, 9, 102, "Electrical", "2025-05-06T14:00:00", "Outlet not working in kitchen", "In Progress", (70, 85, 75), "Agreed"),
    (10, 10, 106, "Carpentry", "2025-05-03T10:00:00", "Repair broken cabinet door", "Completed", (90, 100, 95), "Agreed"),
]


def _email(name: str) -> str:
    return f"{name.split()[0].lower()}@example.com"


def demo_records() -> Dict[str, List[Dict[str, Any]]]:
    """Fresh copy of the demo records keyed by resource name."""
    workers = [
        {
            "id": worker_id,
            "userId": 1000 + worker_id,
            "name": name,
            "email": _email(name),
            "city": city,
            "phoneNumber": f"555-{worker_id:03d}-0000",
            "profilePictureUrl": None,
            "address": f"{100 + worker_id} Main St",
            "serviceName": service,
            "rating": rating,
            "minPrice": min_price,
            "maxPrice": max_price,
            "completedRequests": completed,
            "isLocked": False,
            "isBlocked": False,
        }
        for worker_id, name, city, service, rating, min_price, max_price, completed in _WORKERS
    ]
    customers = [
        {
            "id": customer_id,
            "userId": 2000 + customer_id,
            "name": name,
            "email": _email(name),
            "phoneNumber": f"555-{customer_id:03d}-1111",
            "profilePictureUrl": None,
            "address": f"{customer_id} Oak St",
            "city": city,
            "requestsCount": requests_count,
            "isBlocked": False,
        }
        for customer_id, name, city, requests_count in _CUSTOMERS
    ]
    worker_names = {row[0]: row[1] for row in _WORKERS}
    customers_by_id = {row[0]: row for row in _CUSTOMERS}
    requests = [
        {
            "requestId": request_id,
            "workerId": worker_id,
            "customerId": customer_id,
            "workerName": worker_names[worker_id],
            "customerName": customers_by_id[customer_id][1],
            "customerAddress": f"{customer_id} Oak St, {customers_by_id[customer_id][2]}",
            "serviceName": service,
            "requestDate": date,
            "comment": comment,
            "status": status,
            "customerSuggestedPrice": prices[0],
            "workerSuggestedPrice": prices[1],
            "finalAgreedPrice": prices[2],
            "negotiationStatus": negotiation,
        }
        for request_id, worker_id, customer_id, service, date, comment, status, prices, negotiation in _REQUESTS
    ]
    return {"workers": workers, "customers": customers, "requests": requests}
