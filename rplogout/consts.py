version = "0.3.0"

#: Token type discriminator of ID Tokens in the authorization store
ID_TOKEN_TYPE = "id_token"

#: Where the logout request errors are described
ERROR_URI = (
    "https://openid.net/specs/openid-connect-rpinitiated-1_0.html"
    "#ValidationAndErrorHandling"
)
