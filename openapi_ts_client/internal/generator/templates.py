class Templates:
    """Шаблоны для генерации файлов"""

    regenerate_hint = "Do not edit manually. Run `openapi-ts-client`."

    core_header = f"""/**
 * Auto-generated API request helpers.
 * {regenerate_hint}
 */"""

    core_types = """export type HttpMethod = "GET" | "POST" | "PUT" | "DELETE" | "PATCH" | "HEAD" | "OPTIONS";

export interface ApiRequestOptions {
\tbaseUrl?: string;
\tpathParams?: Record<string, string | number>;
\tquery?: Record<string, string | number | boolean | undefined>;
\theaders?: Record<string, string>;
\tbody?: unknown;
\tinit?: RequestInit;
}

export interface RequestConfig extends ApiRequestOptions {
\tmethod: HttpMethod;
\tpath: string;
}"""

    core_default_base_url = "const DEFAULT_BASE_URL = resolveDefaultBaseUrl();"

    # __BASE_URL__ заменяется выражением базового URL
    core_request = """export function request(config: RequestConfig): Promise<Response> {
\tconst url = buildUrl(config.path, __BASE_URL__, config.pathParams, config.query);
\tconst headers = new Headers(config.init?.headers ?? {});

\tif (config.headers) {
\t\tfor (const [key, value] of Object.entries(config.headers)) {
\t\t\tif (value === undefined) continue;
\t\t\theaders.set(key, value);
\t\t}
\t}

\tconst body = resolveBody(headers, config.body);

\tconst init: RequestInit = {
\t\t...config.init,
\t\tmethod: config.method,
\t\theaders,
\t\tbody,
\t};

\treturn fetch(url, init);
}"""

    core_build_url = r"""function buildUrl(
	pathTemplate: string,
	baseUrl?: string,
	pathParams: Record<string, string | number> = {},
	query: Record<string, string | number | boolean | undefined> = {},
) {
	const pathWithParams = pathTemplate.replace(/\{([^}]+)\}/g, (_, paramName) => {
		if (!(paramName in pathParams)) {
			throw new Error(`Missing path parameter "${paramName}" for ${pathTemplate}`);
		}
		return encodeURIComponent(String(pathParams[paramName]));
	});

	const search = new URLSearchParams();
	for (const [key, value] of Object.entries(query)) {
		if (value === undefined || value === null) continue;
		search.append(key, String(value));
	}

	const queryString = search.toString();
	const relativeUrl = queryString ? `${pathWithParams}?${queryString}` : pathWithParams;

	if (!baseUrl) return relativeUrl;
	try {
		return new URL(relativeUrl, baseUrl).toString();
	} catch {
		return `${baseUrl.replace(/\/$/, "")}${relativeUrl}`;
	}
}"""

    core_resolve_body = """function resolveBody(headers: Headers, body: unknown): BodyInit | undefined {
\tif (body === undefined || body === null) {
\t\treturn undefined;
\t}

\tif (isBodyInit(body)) {
\t\treturn body;
\t}

\tif (!headers.has("Content-Type")) {
\t\theaders.set("Content-Type", "application/json");
\t}

\treturn JSON.stringify(body);
}

function isBodyInit(value: unknown): value is BodyInit {
\tif (typeof value === "string") return true;
\tif (value instanceof ArrayBuffer || ArrayBuffer.isView(value)) return true;
\tif (typeof Blob !== "undefined" && value instanceof Blob) return true;
\tif (typeof FormData !== "undefined" && value instanceof FormData) return true;
\tif (typeof URLSearchParams !== "undefined" && value instanceof URLSearchParams) return true;
\tif (typeof ReadableStream !== "undefined" && value instanceof ReadableStream) return true;
\treturn false;
}"""

    # {env_name} подставляется через format
    core_resolve_default_base_url = """function resolveDefaultBaseUrl(): string | undefined {{
\tif (typeof process !== "undefined" && typeof process.env === "object" && process.env?.{env_name}) {{
\t\treturn process.env.{env_name};
\t}}

\tconst meta = import.meta as {{ env?: Record<string, string | undefined> }};
\tif (typeof meta.env === "object" && meta.env?.{env_name}) {{
\t\treturn meta.env.{env_name};
\t}}

\treturn undefined;
}}"""

    # {tag} подставляется через format
    tag_header = '// Auto-generated client for tag "{tag}".\n// ' + regenerate_hint

    tag_imports = [
        'import { request } from "./core";',
        'import type { ApiRequestOptions } from "./core";',
    ]

    function = """export function {name}(options: ApiRequestOptions = {{}}) {{
\treturn request({{
\t\tmethod: {method},
\t\tpath: {path},
\t\t...options,
\t}});
}}"""

    postman_schema = (
        "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"
    )

    postman_raw_body = "{\n  \n}"

    postman_base_url_description = (
        "Set this to your API base URL when importing into Postman."
    )


templates = Templates()
