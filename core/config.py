"""
配置管理模块
使用Pydantic Settings从环境变量加载配置
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    坐标转换配置类
    从环境变量加载配置，支持类型转换和验证
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 未声明的 env 变量忽略，不抛出校验错误
    )

    # 精度控制
    coord_precision: int = Field(
        8,
        ge=0,
        le=15,
        validation_alias="GEOSHIFT_COORD_PRECISION",
        description="每个转换阶段输出坐标保留的小数位数",
    )
    inverse_threshold: float = Field(
        1e-8,
        gt=0,
        validation_alias="GEOSHIFT_INVERSE_THRESHOLD",
        description="GCJ02 反算迭代的收敛阈值（度）",
    )
    inverse_max_iterations: int = Field(
        50,
        ge=1,
        validation_alias="GEOSHIFT_INVERSE_MAX_ITERATIONS",
        description="GCJ02 反算迭代的最大次数",
    )

    # 批量转换配置
    batch_workers: int = Field(
        1,
        ge=1,
        validation_alias="GEOSHIFT_BATCH_WORKERS",
        description="批量转换线程数，1 表示顺序执行",
    )
    batch_parallel_min_size: int = Field(
        1000,
        ge=1,
        validation_alias="GEOSHIFT_BATCH_PARALLEL_MIN_SIZE",
        description="启用线程池的最小批量大小",
    )

    # 日志配置
    log_level: str = Field(
        "INFO",
        validation_alias="GEOSHIFT_LOG_LEVEL",
        description="命令行入口的日志等级",
    )


settings = Settings()
