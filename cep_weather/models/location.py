"""Location model for postal code lookups."""

from pydantic import BaseModel, ConfigDict, Field


class LocationLookupResult(BaseModel):
    """Address information returned by the ViaCEP API."""

    model_config = ConfigDict(populate_by_name=True)

    postal_code: str = Field("", alias="cep")
    street: str = Field("", alias="logradouro")
    complement: str = Field("", alias="complemento")
    neighborhood: str = Field("", alias="bairro")
    city: str = Field("", alias="localidade")
    state: str = Field("", alias="uf")
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""
    error: bool = Field(False, alias="erro")
