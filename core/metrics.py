from prometheus_client import Counter, Histogram

ENDPOINT_LATENCY = Histogram(
    "endpoint_latency_seconds",
    "Latency of HTTP requests by endpoint",
    ["method", "endpoint"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)

MENU_BUILD_LATENCY = Histogram(
    "navigation_menu_build_latency_seconds",
    "Tempo para filtrar e anotar o menu de navegação",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)

SECTION_TOGGLES = Counter(
    "navigation_section_toggles_total",
    "Total de seções abertas ou fechadas manualmente",
    ["state"],
)

PERMISSION_ENTRIES_DROPPED = Counter(
    "navigation_permission_entries_dropped_total",
    "Entradas de permissão descartadas por não serem strings",
)
