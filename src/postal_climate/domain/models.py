"""
postal_climate.domain.models

Pydantic models for request payloads, upstream responses and the service output.

Responsibilities:
- Decode ViaCEP and WeatherAPI payloads strictly enough to reject malformed bodies.
- Fix the four-key `TemperatureResult` wire shape shared by both services.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PostalCodeRequest(BaseModel):
    # A missing field decodes as "" so it fails postal code validation (422), not body parsing (400).
    model_config = ConfigDict(strict=True)

    postal_code: str = ""


class Location(BaseModel):
    """
    ViaCEP `/<cep>/json/` record. Unknown CEPs come back as `{"erro": true}`, which
    decodes to an empty `city`.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    postal_code: str = Field(default="", alias="cep")
    address_line1: str = Field(default="", alias="logradouro")
    address_line2: str = Field(default="", alias="complemento")
    neighborhood: str = Field(default="", alias="bairro")
    city: str = Field(default="", alias="localidade")
    state: str = Field(default="", alias="uf")
    ibge_code: str = Field(default="", alias="ibge")
    gia_code: str = Field(default="", alias="gia")
    area_code: str = Field(default="", alias="ddd")
    siafi_code: str = Field(default="", alias="siafi")


class WeatherCondition(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str = ""


class CurrentWeather(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temp_c: float
    temp_f: float | None = None
    last_updated: str = ""
    condition: WeatherCondition = Field(default_factory=WeatherCondition)


class WeatherLocation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    region: str = ""
    country: str = ""
    localtime: str = ""


class ClimateReading(BaseModel):
    """WeatherAPI `/v1/current.json` payload; only `current.temp_c` is consumed."""

    model_config = ConfigDict(extra="ignore")

    location: WeatherLocation = Field(default_factory=WeatherLocation)
    current: CurrentWeather

    @property
    def celsius(self) -> float:
        return self.current.temp_c


class TemperatureResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city: str
    celsius: float = Field(alias="temp_C")
    fahrenheit: float = Field(alias="temp_F")
    kelvin: float = Field(alias="temp_K")

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


class ErrorBody(BaseModel):
    message: str
