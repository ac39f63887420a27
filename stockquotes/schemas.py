from pydantic import BaseModel, ConfigDict, Field
from typing import List

class Stock(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str = Field(default="", description="Company name as shown on the quote page")
    price: str = Field(description="Price text exactly as displayed")
    change: str = Field(default="", description="Percent change text exactly as displayed")
    currency: str = Field(default="", description="ISO currency code, empty for indices and futures")
    timestamp: str = Field(description="Local extraction time, YYYY-MM-DD HH:MM:SS")

class RunResult(BaseModel):
    stocks: List[Stock] = Field(default_factory=list)
    tickers_processed: int = 0
    succeeded: List[str] = Field(default_factory=list, description="Tickers that yielded a record")
    failed: List[str] = Field(default_factory=list, description="Tickers with no data found")

    @property
    def records_collected(self) -> int:
        return len(self.stocks)

    @property
    def success_rate(self) -> float:
        """Records per processed ticker, as a percentage."""
        if not self.tickers_processed:
            return 0.0
        return self.records_collected / self.tickers_processed * 100
