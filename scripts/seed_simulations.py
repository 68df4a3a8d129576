"""
Seed script: runs a handful of sample simulations through the API.

Usage:
    python -m scripts.seed_simulations

This submits:
- the same four-job workload under FCFS, SJF and Round Robin (quantum 2 and 4)
- one comparison of all three algorithms (not stored)

Run it after starting the API to populate the simulation history.
"""

import httpx

BASE_URL = "http://localhost:8000"

WORKLOAD = [
    {"name": "P0", "burst_time": 5},
    {"name": "P1", "burst_time": 3},
    {"name": "P2", "burst_time": 8},
    {"name": "P3", "burst_time": 6},
]


def seed():
    client = httpx.Client(base_url=BASE_URL, timeout=10.0)

    runs = [
        {"algorithm": "fcfs", "jobs": WORKLOAD},
        {"algorithm": "sjf", "jobs": WORKLOAD},
        {"algorithm": "rr", "time_quantum": 2, "jobs": WORKLOAD},
        {"algorithm": "rr", "time_quantum": 4, "jobs": WORKLOAD},
    ]

    print(f"Submitting {len(runs)} simulations to {BASE_URL}...\n")

    for run in runs:
        resp = client.post("/simulations/", json=run)
        resp.raise_for_status()
        data = resp.json()
        print(
            f"  [{data['algorithm']}] avg wait {data['average_wait_time']:.1f}, "
            f"avg turnaround {data['average_turnaround_time']:.1f} (id: {data['id'][:8]}...)"
        )

    resp = client.post("/simulations/compare", json={"time_quantum": 2, "jobs": WORKLOAD})
    resp.raise_for_status()
    print("\nComparison:")
    for report in resp.json():
        print(f"  {report['algorithm']:<5} wait {report['average_wait_time']:>5.1f}  "
              f"turnaround {report['average_turnaround_time']:>5.1f}")

    print("\nHistory:  curl http://localhost:8000/simulations/")
    print("Stats:    curl http://localhost:8000/simulations/stats")


if __name__ == "__main__":
    seed()
