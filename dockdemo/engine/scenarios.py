"""
The six scripted Docker scenarios.

Each script is a literal list of steps. Numbers here (command counts,
pause lengths, metric ranges, fixed scores) are what the dashboard has
always shown; change them and the demo tells a different story.
"""

from __future__ import annotations

import random
from typing import Dict, List, Union

from dockdemo.engine.runner import Metrics, Scenario, Step
from dockdemo.engine.timing import Delay
from dockdemo.errors import ScenarioNotFound
from dockdemo.state.logs import LogCategory, LogType
from dockdemo.state.system import SystemState

INFO = LogType.INFO


def _containers(n: int):
    def mutate(state: SystemState) -> None:
        state.add(containers=n)
    return mutate


def _images(n: int):
    def mutate(state: SystemState) -> None:
        state.add(images=n)
    return mutate


def _networks(n: int):
    def mutate(state: SystemState) -> None:
        state.add(networks=n)
    return mutate


# ----------------------------------------------------------------------------
# Orchestration: 2 images, 1 network, 6 containers over 9 docker invocations
# ----------------------------------------------------------------------------

ORCHESTRATION = Scenario(
    category=LogCategory.ORCHESTRATION,
    intro="Starting multi-container orchestration test...",
    steps=(
        Step("Web application image built successfully",
             commands=("docker build -t web-app .",), mutate=_images(1)),
        Step("Database service image built successfully",
             commands=("docker build -t db-service .",), mutate=_images(1)),
        Step("Created overlay network: app-network",
             commands=("docker network create app-network",), mutate=_networks(1)),
        Step("PostgreSQL container started",
             commands=("docker run -d --name postgres --network app-network postgres:14",),
             mutate=_containers(1)),
        Step("Redis container started",
             commands=("docker run -d --name redis --network app-network redis:alpine",),
             mutate=_containers(1)),
        Step("3 web application containers started",
             commands=(
                 "docker run -d --name web-1 --network app-network web-app",
                 "docker run -d --name web-2 --network app-network web-app",
                 "docker run -d --name web-3 --network app-network web-app",
             ),
             mutate=_containers(3)),
        Step("Nginx load balancer started",
             commands=("docker run -d --name nginx-lb --network app-network nginx",),
             mutate=_containers(1)),
    ),
    outro="Multi-container orchestration completed successfully!",
    completed="Orchestration test completed",
    summary=lambda m: {
        "containers_started": 6,
        "networks_created": 1,
        "images_built": 2,
    },
)


# ----------------------------------------------------------------------------
# Deployment: blue-green switch with fixed health-check and traffic pauses
# ----------------------------------------------------------------------------

DEPLOYMENT = Scenario(
    category=LogCategory.DEPLOYMENT,
    intro="Starting Blue-Green deployment test...",
    steps=(
        Step("Current: Blue environment (v1.0) - 100% traffic", type=INFO),
        Step("New version built: Green environment (v1.1)",
             commands=("docker build -t app:v1.1 .",), mutate=_images(1)),
        Step("Green environment deployed (3 containers)",
             commands=(
                 "docker run -d --name green-1 app:v1.1",
                 "docker run -d --name green-2 app:v1.1",
                 "docker run -d --name green-3 app:v1.1",
             ),
             mutate=_containers(3)),
        Step("Health check: Response time < 200ms ✓", delay=Delay.fixed(1500)),
        Step("Health check: All endpoints responding ✓"),
        Step("Health check: Database connectivity OK ✓"),
        Step("Switching traffic: Blue → Green", type=INFO, delay=Delay.fixed(1000)),
        Step("Traffic successfully switched to Green (v1.1)", delay=Delay.fixed(2000)),
        Step("Blue environment stopped", type=INFO,
             commands=("docker stop blue-1 blue-2 blue-3",)),
    ),
    outro="Blue-Green deployment completed! Zero downtime achieved.",
    completed="Blue-Green deployment completed",
    summary=lambda m: {
        "downtime": "0ms",
        "new_version": "v1.1",
    },
)


# ----------------------------------------------------------------------------
# Security: four inspections, fixed compliance score
# ----------------------------------------------------------------------------

COMPLIANCE_SCORE = "98%"
VULNERABILITIES = {"critical": 0, "high": 0, "medium": 2, "low": 5}

SECURITY = Scenario(
    category=LogCategory.SECURITY,
    intro="Starting security audit...",
    steps=(
        Step("Privilege check: All containers running as non-root ✓",
             commands=('docker inspect --format="{{.Config.User}}" container',)),
        Step("Vulnerability scan: No critical vulnerabilities found ✓",
             commands=("docker scan app:latest",)),
        Step("Found 2 medium-risk packages (auto-fixable)", type=INFO),
        Step("Capabilities: NET_ADMIN, SYS_ADMIN dropped ✓",
             commands=('docker inspect --format="{{.HostConfig.CapDrop}}" container',)),
        Step("Filesystem: Root filesystem read-only ✓",
             commands=('docker inspect --format="{{.HostConfig.ReadonlyRootfs}}" container',)),
    ),
    outro=f"Security audit completed. Compliance: {COMPLIANCE_SCORE}",
    completed="Security audit completed",
    summary=lambda m: {
        "compliance_score": COMPLIANCE_SCORE,
        "vulnerabilities": dict(VULNERABILITIES),
    },
)


# ----------------------------------------------------------------------------
# Performance: four timed benchmarks, one sampled metric each
# ----------------------------------------------------------------------------

def _sample_performance(rng: random.Random) -> Metrics:
    startup_time = rng.random() * 0.8 + 0.8          # 0.8-1.6s
    memory_usage = int(rng.random() * 20 + 35)       # 35-55MB
    disk_io = f"{rng.random() * 0.5 + 1.0:.1f}"      # 1.0-1.5GB/s
    network_throughput = f"{rng.random() * 2 + 8:.1f}"  # 8-10Gbps
    return {
        "startup_time": startup_time,
        "memory_usage": memory_usage,
        "disk_io": disk_io,
        "disk_write": f"{float(disk_io) * 0.7:.1f}",
        "network_throughput": network_throughput,
        "network_native": f"{float(network_throughput) / 10 * 100:.0f}",
    }


PERFORMANCE = Scenario(
    category=LogCategory.PERFORMANCE,
    intro="Starting performance benchmarks...",
    steps=(
        Step("Container startup time: {startup_time:.1f}s", delay=Delay.fixed(1000)),
        Step("Memory usage: {memory_usage}MB (optimized)", delay=Delay.fixed(800)),
        Step("Disk I/O: {disk_io}GB/s read, {disk_write}GB/s write", delay=Delay.fixed(1200)),
        Step("Network: {network_throughput}Gbps ({network_native}% native)", delay=Delay.fixed(1000)),
    ),
    outro="Performance benchmark completed. Overall: 96% native speed.",
    completed="Performance benchmark completed",
    sample=_sample_performance,
    summary=lambda m: {
        "metrics": {
            "startup_time": m["startup_time"],
            "memory_usage": m["memory_usage"],
            "disk_io": m["disk_io"],
            "network_throughput": m["network_throughput"],
            "native_performance": "96%",
        },
    },
)


# ----------------------------------------------------------------------------
# Network: encrypted overlay, service discovery, sampled latency/throughput
# ----------------------------------------------------------------------------

def _sample_network(rng: random.Random) -> Metrics:
    return {
        "latency": f"{rng.random() * 0.3 + 0.1:.1f}",   # 0.1-0.4ms
        "throughput": int(rng.random() * 10 + 35),      # 35-45Gbps
    }


NETWORK = Scenario(
    category=LogCategory.NETWORK,
    intro="Configuring advanced networking...",
    steps=(
        Step("Overlay network with encryption created",
             commands=("docker network create --driver overlay encrypted-network",),
             mutate=_networks(1)),
        Step("Service discovery configured",
             commands=("docker service create --network encrypted-network web-service",)),
        Step("Inter-container latency: {latency}ms", delay=Delay.fixed(1500)),
        Step("Internal network throughput: {throughput}Gbps"),
    ),
    outro="Advanced networking configured. Service mesh operational.",
    completed="Network test completed",
    sample=_sample_network,
    summary=lambda m: {
        "metrics": {
            "latency": m["latency"],
            "throughput": m["throughput"],
            "encryption": "enabled",
            "service_discovery": "active",
        },
    },
)


# ----------------------------------------------------------------------------
# Storage: two volumes, persistence check, backup schedule
# ----------------------------------------------------------------------------

VOLUMES = ("db-data", "app-logs")
BACKUP_POLICY = {"frequency": "6 hours", "retention": "30 days", "encryption": "AES-256"}

STORAGE = Scenario(
    category=LogCategory.STORAGE,
    intro="Configuring persistent storage...",
    steps=(
        Step("Persistent volumes created: db-data, app-logs",
             commands=tuple(f"docker volume create {volume}" for volume in VOLUMES)),
        Step("Data persistence test: Container restart → data intact ✓, "
             "Host reboot → data intact ✓",
             delay=Delay.fixed(1500)),
        Step("Automated backup configured: Every 6 hours, retention 30 days",
             commands=("setup-backup-schedule",)),
    ),
    outro="Storage configured. Data protection and replication active.",
    completed="Storage test completed",
    summary=lambda m: {
        "volumes": list(VOLUMES),
        "backup": dict(BACKUP_POLICY),
    },
)


SCENARIOS: Dict[LogCategory, Scenario] = {
    scenario.category: scenario
    for scenario in (ORCHESTRATION, DEPLOYMENT, SECURITY, PERFORMANCE, NETWORK, STORAGE)
}


def get_scenario(name: Union[str, LogCategory]) -> Scenario:
    """Look up a scenario by name, raising ScenarioNotFound if there is none."""
    try:
        return SCENARIOS[LogCategory(name)]
    except ValueError:
        raise ScenarioNotFound(str(name)) from None


def scenario_names() -> List[str]:
    return [category.value for category in SCENARIOS]
