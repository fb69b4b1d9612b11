"""
Prometheus metrics
"""
import time

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

# HTTP запросы
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

# Время обработки запросов
http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Обращения к кэшу по семействам ресурсов
cache_requests_total = Counter(
    'cache_requests_total',
    'Cache lookups by resource family',
    ['family', 'result']  # 'hit' или 'miss'
)

# Вытеснения при переполнении
cache_evictions_total = Counter(
    'cache_evictions_total',
    'Entries evicted because the cache was full'
)

# Удаление просроченных записей
cache_expired_total = Counter(
    'cache_expired_total',
    'Expired entries removed from the cache',
    ['reason']  # 'lazy', 'sweep' или 'capacity'
)

# Явная инвалидация после мутаций
cache_invalidations_total = Counter(
    'cache_invalidations_total',
    'Keys purged after a successful mutation',
    ['family']
)

# Текущее число записей
cache_entries = Gauge(
    'cache_entries',
    'Current number of cache entries'
)


def setup_metrics(app: FastAPI):
    """Настройка метрик для FastAPI приложения"""

    @app.get("/metrics", include_in_schema=False)
    async def metrics():
        """Endpoint для Prometheus метрик"""
        return Response(
            content=generate_latest(),
            media_type=CONTENT_TYPE_LATEST
        )

    # Middleware для автоматического сбора метрик
    @app.middleware("http")
    async def metrics_middleware(request, call_next):
        """Middleware для сбора метрик HTTP запросов"""
        method = request.method
        path = request.url.path

        # Игнорирование health check и metrics
        if path in ["/health", "/metrics", "/favicon.ico"]:
            return await call_next(request)

        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time

        http_requests_total.labels(
            method=method,
            endpoint=path,
            status_code=response.status_code
        ).inc()

        http_request_duration_seconds.labels(
            method=method,
            endpoint=path
        ).observe(duration)

        return response


# Функции для обновления метрик кэша
def track_cache_lookup(family: str, hit: bool):
    """Отслеживание попадания/промаха"""
    cache_requests_total.labels(family=family, result='hit' if hit else 'miss').inc()


def track_eviction():
    """Отслеживание вытеснения"""
    cache_evictions_total.inc()


def track_expired(reason: str, count: int = 1):
    """Отслеживание удаления просроченных записей"""
    if count:
        cache_expired_total.labels(reason=reason).inc(count)


def track_invalidation(family: str, count: int = 1):
    """Отслеживание инвалидации"""
    if count:
        cache_invalidations_total.labels(family=family).inc(count)


def track_cache_size(size: int):
    """Обновление размера кэша"""
    cache_entries.set(size)
